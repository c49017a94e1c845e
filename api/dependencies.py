import logging

from application.services import RateService
from config.settings import Settings, get_settings
from infrastructure.providers import AlphaVantageProvider, RateProvider

logger = logging.getLogger(__name__)


class AppDependencies:
	"""Container for application-wide singleton dependencies."""

	provider: RateProvider | None = None
	rate_service: RateService | None = None


deps = AppDependencies()


def init_dependencies(settings: Settings | None = None) -> None:
	"""Initialize all singleton dependencies. Called at app startup."""
	logger.info('Initializing dependencies...')
	settings = settings or get_settings()

	deps.provider = AlphaVantageProvider(
		api_key=settings.API_KEY,
		base_url=settings.UPSTREAM_BASE_URL,
		target_currency=settings.TARGET_CURRENCY,
		timeout=settings.UPSTREAM_TIMEOUT,
	)
	deps.rate_service = RateService(
		provider=deps.provider,
		symbols=settings.SYMBOLS,
		worker_pool_size=settings.WORKER_POOL_SIZE,
	)
	logger.info('Dependencies initialized')


async def cleanup_dependencies() -> None:
	logger.info('Cleaning up dependencies...')

	if deps.provider:
		await deps.provider.close()
	deps.provider = None
	deps.rate_service = None

	logger.info('Cleanup complete')


def get_rate_service() -> RateService:
	if deps.rate_service is None:
		raise RuntimeError('Rate service not initialized')
	return deps.rate_service
