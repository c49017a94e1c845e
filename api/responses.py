from collections.abc import Iterable

from fastapi import Response, status

from domain.models.currency import ExchangeRate

GENERIC_ERROR_MESSAGE = 'Unexpected error'

CORS_HEADERS = {'Access-Control-Allow-Origin': '*'}


def render_rates(rates: Iterable[ExchangeRate]) -> str:
	return '[' + ','.join(rate.to_json() for rate in rates) + ']'


def success_response(body: str) -> Response:
	return Response(
		content=body,
		status_code=status.HTTP_200_OK,
		media_type='application/json',
		headers=CORS_HEADERS,
	)


def error_response(
	status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR, message: str = GENERIC_ERROR_MESSAGE
) -> Response:
	# Body stays plain text under the JSON content type; clients rely on it
	return Response(
		content=message,
		status_code=status_code,
		media_type='application/json',
		headers=CORS_HEADERS,
	)
