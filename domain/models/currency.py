from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True)
class ExchangeRate:
    time: str  # as sent by upstream, never reparsed
    from_currency: str
    to_currency: str
    bid: str
    ask: str

    def to_json(self) -> str:
        return (
            f'{{"time":"{self.time}", "fromCurrency":"{self.from_currency}", '
            f'"toCurrency":"{self.to_currency}", "bid":"{self.bid}", "ask":"{self.ask}"}}'
        )


@dataclass(frozen=True)
class FetchError:
    symbol: str
    reason: str


@dataclass(frozen=True)
class RequestContext:
    request_id: str
    remote_address: str
    params: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))

    @property
    def currency(self) -> str | None:
        return self.params.get("currency")
