"""
Tolerant recursive-descent JSON parser.

Only four forms are recognised by their leading character: objects, arrays,
strings and unsigned integers. Every other character (whitespace, colons,
commas outside a container loop) is skipped without validation, so malformed
input degrades to partial or empty results instead of raising.

Known limitations:
- strings have no escape handling, an embedded ``\\"`` ends the string early
- numbers are ASCII digit runs only (no sign, fraction or exponent) and must
  fit a signed 32-bit integer
"""
from domain.exceptions.currency import DecodeFailure
from domain.models.json_value import (
    JsonArray,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonValue,
)

INT32_MAX = 2**31 - 1


class JsonParser:
    def __init__(self, data: str):
        self.data = data
        self.position = 0

    def _at_end(self) -> bool:
        return self.position >= len(self.data)

    def _current(self) -> str:
        return self.data[self.position]

    def parse_value(self) -> JsonValue:
        while not self._at_end():
            char = self._current()
            if char == '{':
                return self.parse_object()
            if char == '[':
                return self.parse_array()
            if char == '"':
                return JsonString(self._parse_string())
            if '0' <= char <= '9':
                return self._parse_number()
            self.position += 1
        return JsonNull()

    def parse_object(self) -> JsonObject:
        members: list[tuple[str, JsonValue]] = []
        while not self._at_end():
            char = self._current()
            if char in '{,':
                key = self._parse_string()
                members.append((key, self.parse_value()))
            elif char == '}':
                self.position += 1
                break
            else:
                self.position += 1
        return JsonObject(tuple(members))

    def parse_array(self) -> JsonArray:
        items: list[JsonValue] = []
        while not self._at_end():
            char = self._current()
            if char in '[,':
                self.position += 1
                items.append(self.parse_value())
            elif char == ']':
                self.position += 1
                break
            else:
                self.position += 1
        return JsonArray(tuple(items))

    def _parse_string(self) -> str:
        while not self._at_end():
            if self._current() == '"':
                self.position += 1
                start = self.position
                while not self._at_end() and self._current() != '"':
                    self.position += 1
                result = self.data[start:self.position]
                self.position += 1
                return result
            self.position += 1
        return ''

    def _parse_number(self) -> JsonNumber:
        start = self.position
        while not self._at_end() and '0' <= self._current() <= '9':
            self.position += 1
        digits = self.data[start:self.position]
        value = int(digits)
        if value > INT32_MAX:
            raise DecodeFailure(f'Number out of 32-bit range at offset {start}: {digits}')
        return JsonNumber(value)


def parse(data: str) -> JsonValue:
    return JsonParser(data).parse_value()


def parse_object_document(data: str) -> JsonObject:
    """Parse ``data`` as an object from offset zero, the way upstream payloads are read."""
    return JsonParser(data).parse_object()
