import logging
import time

import httpx

from domain.exceptions.currency import DecodeFailure, TransportFailure
from domain.models.currency import ExchangeRate, FetchError
from infrastructure.decoding import extract_exchange_rate, parse_object_document
from infrastructure.monitoring.logger import get_request_logger
from infrastructure.providers.base import RateProvider

logger = logging.getLogger(__name__)


class AlphaVantageProvider(RateProvider):
	BASE_URL = 'https://www.alphavantage.co/query'

	def __init__(
		self,
		api_key: str,
		base_url: str = BASE_URL,
		target_currency: str = 'RUB',
		client: httpx.AsyncClient | None = None,
		timeout: int = 10,
	):
		self.api_key = api_key
		self.base_url = base_url
		self.target_currency = target_currency
		self._client = client or httpx.AsyncClient(timeout=timeout)

	@property
	def name(self) -> str:
		return 'alphavantage'

	def build_url(self, symbol: str) -> str:
		return (
			f'{self.base_url}?function=CURRENCY_EXCHANGE_RATE&from_currency={symbol}'
			f'&to_currency={self.target_currency}&apikey={self.api_key}'
		)

	async def _request(self, symbol: str) -> str:
		try:
			response = await self._client.get(self.build_url(symbol))
			response.raise_for_status()
			return response.text

		except httpx.HTTPStatusError as e:
			raise TransportFailure(
				f'Alpha Vantage HTTP error {e.response.status_code}: {e.response.text[:200]}'
			) from e
		except httpx.RequestError as e:
			raise TransportFailure(f'Alpha Vantage request failed: {e.__class__.__name__}') from e

	async def fetch(self, symbol: str) -> ExchangeRate | FetchError:
		start_time = time.perf_counter()
		try:
			body = await self._request(symbol)
			rate = extract_exchange_rate(parse_object_document(body))
		except (TransportFailure, DecodeFailure) as e:
			return self._failed(symbol, str(e), start_time)

		get_request_logger().log_api_call(
			self.name, symbol, True, (time.perf_counter() - start_time) * 1000
		)
		return rate

	def _failed(self, symbol: str, reason: str, start_time: float) -> FetchError:
		logger.error(f'Provider {self.name} failed for {symbol}: {reason}')
		get_request_logger().log_api_call(
			self.name, symbol, False, (time.perf_counter() - start_time) * 1000, error_message=reason
		)
		return FetchError(symbol=symbol, reason=reason)

	async def close(self) -> None:
		await self._client.aclose()
