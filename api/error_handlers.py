import logging

from fastapi import FastAPI, Request, status

from api.responses import error_response
from domain.exceptions.currency import CurrencyException

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
	@app.exception_handler(CurrencyException)
	async def currency_error_handler(request: Request, exc: CurrencyException):
		logger.error(f'Rate lookup error: {exc}')
		return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR)

	@app.exception_handler(Exception)
	async def global_exception_handler(request: Request, exc: Exception):
		logger.error(f'Unhandled exception: {exc}', exc_info=True)
		return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR)
