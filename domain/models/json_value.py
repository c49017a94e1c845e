from dataclasses import dataclass
from enum import Enum
from typing import Any


class JsonKind(Enum):
    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"
    NULL = "null"


class JsonValue:
    """Base of the decoded JSON tree. Every node carries a ``kind`` tag."""

    kind: JsonKind

    def to_python(self) -> Any:
        raise NotImplementedError


@dataclass(frozen=True)
class JsonString(JsonValue):
    value: str
    kind = JsonKind.STRING

    def to_python(self) -> str:
        return self.value


@dataclass(frozen=True)
class JsonNumber(JsonValue):
    value: int
    kind = JsonKind.NUMBER

    def to_python(self) -> int:
        return self.value


@dataclass(frozen=True)
class JsonNull(JsonValue):
    kind = JsonKind.NULL

    def to_python(self) -> None:
        return None


@dataclass(frozen=True)
class JsonArray(JsonValue):
    items: tuple[JsonValue, ...] = ()
    kind = JsonKind.ARRAY

    def __len__(self) -> int:
        return len(self.items)

    def to_list(self) -> list[Any]:
        return [item.to_python() for item in self.items]

    def to_python(self) -> list[Any]:
        return self.to_list()


@dataclass(frozen=True)
class JsonObject(JsonValue):
    # insertion ordered; a later duplicate key shadows an earlier one
    members: tuple[tuple[str, JsonValue], ...] = ()
    kind = JsonKind.OBJECT

    def __len__(self) -> int:
        return len(self.to_dict())

    def get(self, key: str) -> JsonValue | None:
        found = None
        for name, value in self.members:
            if name == key:
                found = value
        return found

    def keys(self) -> list[str]:
        return list(dict(self.members).keys())

    def to_dict(self) -> dict[str, Any]:
        return {name: value.to_python() for name, value in self.members}

    def to_python(self) -> dict[str, Any]:
        return self.to_dict()
