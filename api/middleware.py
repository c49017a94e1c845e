import logging
import time
import uuid
from collections.abc import Awaitable, Callable

from fastapi import Request, Response, status

from api.responses import error_response
from domain.models.currency import RequestContext
from infrastructure.monitoring.logger import get_request_logger

logger = logging.getLogger(__name__)


def parse_query_string(query: str | None) -> dict[str, str]:
	"""
	Split a raw query string into parameters.

	Segments are split on the first ``=``, the last duplicate wins and values
	are kept exactly as sent (no percent-decoding).
	"""
	params: dict[str, str] = {}
	if not query:
		return params

	for segment in query.split('&'):
		if not segment:
			continue
		name, _, value = segment.partition('=')
		params[name] = value
	return params


def remote_address(request: Request) -> str:
	if request.client is None:
		return 'unknown'
	return f'{request.client.host}:{request.client.port}'


def build_request_context(request: Request) -> RequestContext:
	return RequestContext(
		request_id=str(uuid.uuid4()),
		remote_address=remote_address(request),
		params=parse_query_string(request.url.query),
	)


async def request_context_middleware(
	request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
	context = build_request_context(request)
	request.state.context = context

	request_logger = get_request_logger()
	request_logger.log_request_received(context.request_id, context.remote_address, dict(context.params))
	start_time = time.perf_counter()

	try:
		response = await call_next(request)
	except Exception as e:
		logger.error(f'Unhandled exception in request {context.request_id}: {e}', exc_info=True)
		response = error_response(status.HTTP_500_INTERNAL_SERVER_ERROR)

	duration_ms = (time.perf_counter() - start_time) * 1000
	if response.status_code < 400:
		request_logger.log_request_completed(context.request_id, context.remote_address, duration_ms)
	else:
		request_logger.log_request_failed(
			context.request_id, context.remote_address, response.status_code, duration_ms
		)

	response.headers['X-Request-ID'] = context.request_id
	return response
