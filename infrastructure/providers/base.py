from abc import ABC, abstractmethod

from domain.models.currency import ExchangeRate, FetchError


class RateProvider(ABC):
    """Upstream source of exchange rates for one target currency."""

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @abstractmethod
    async def fetch(self, symbol: str) -> ExchangeRate | FetchError:
        """Fetch the rate for ``symbol``. Failures are returned, never raised."""
        ...

    async def close(self) -> None:
        return None
