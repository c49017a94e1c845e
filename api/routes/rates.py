from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response

from api.dependencies import get_rate_service
from api.responses import error_response, render_rates, success_response
from application.services import RateService
from domain.models.currency import FetchError, RequestContext

router = APIRouter(tags=['rates'])


@router.get(
	'/api',
	summary='Get exchange rates',
	description='All configured currencies in fixed order, or one currency when ?currency= is given',
)
async def get_exchange_rates(
	request: Request,
	service: Annotated[RateService, Depends(get_rate_service)],
) -> Response:
	context: RequestContext = request.state.context

	result = await service.get_rates(context)
	if isinstance(result, FetchError):
		return error_response()
	return success_response(render_rates(result))
