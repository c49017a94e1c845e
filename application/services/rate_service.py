import asyncio
import logging

from domain.models.currency import ExchangeRate, FetchError, RequestContext
from infrastructure.providers.base import RateProvider

logger = logging.getLogger(__name__)

DEFAULT_SYMBOLS = ('USD', 'EUR', 'GBP', 'CNY', 'BTC')


class RateService:
    def __init__(
        self,
        provider: RateProvider,
        symbols: list[str] | tuple[str, ...] = DEFAULT_SYMBOLS,
        worker_pool_size: int = 8,
    ):
        self.provider = provider
        self.symbols = tuple(symbols)
        self._slots = asyncio.Semaphore(worker_pool_size)

    async def get_rates(self, context: RequestContext) -> list[ExchangeRate] | FetchError:
        currency = context.currency
        if currency is not None:
            return await self.get_rate(currency.upper())
        return await self.get_all_rates()

    async def get_rate(self, symbol: str) -> list[ExchangeRate] | FetchError:
        result = await self._fetch(symbol)
        if isinstance(result, FetchError):
            return result
        return [result]

    async def get_all_rates(self) -> list[ExchangeRate] | FetchError:
        tasks = [self._fetch(symbol) for symbol in self.symbols]

        # gather keeps results in task order, not completion order
        results = await asyncio.gather(*tasks)

        return self._aggregate(results)

    async def _fetch(self, symbol: str) -> ExchangeRate | FetchError:
        async with self._slots:
            return await self.provider.fetch(symbol)

    def _aggregate(self, results: list[ExchangeRate | FetchError]) -> list[ExchangeRate] | FetchError:
        rates: list[ExchangeRate] = []
        for result in results:
            if isinstance(result, FetchError):
                logger.error(f'Fan-out aborted, {result.symbol} failed: {result.reason}')
                return result
            rates.append(result)
        return rates
