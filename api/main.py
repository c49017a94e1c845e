import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from api.dependencies import cleanup_dependencies, init_dependencies
from api.error_handlers import register_exception_handlers
from api.middleware import request_context_middleware
from api.routes import rates
from config.settings import get_settings
from infrastructure.monitoring.logger import setup_logging

settings = get_settings()

setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
	logger.info('Starting Exchange Rate Gateway...')

	init_dependencies(settings)

	logger.info('Application ready')

	yield

	logger.info('Shutting down...')
	await cleanup_dependencies()


app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)

app.middleware('http')(request_context_middleware)
app.include_router(rates.router)
register_exception_handlers(app)


def run() -> None:
	import uvicorn

	logger.info(f'Starting server on {settings.HOST}:{settings.PORT}')

	uvicorn.run(
		'api.main:app',
		host=settings.HOST,
		port=settings.PORT,
		log_level=settings.LOG_LEVEL.lower(),
	)


if __name__ == '__main__':
	run()
