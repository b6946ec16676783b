from fastapi import APIRouter, Request
from fastapi.responses import ORJSONResponse

from device_info_service.dto.info_response import InfoResponse
from device_info_service.utils.utils import get_app_info

health_api = APIRouter(prefix="/api")


@health_api.get("/health", response_class=ORJSONResponse)
def health() -> ORJSONResponse:
    return ORJSONResponse(content={"status": "healthy"})


@health_api.get("/info", response_model=InfoResponse, response_class=ORJSONResponse)
def info(request: Request) -> ORJSONResponse:
    messenger = getattr(request.app.state, "messenger", None)
    channel_names = messenger.channel_names() if messenger is not None else []
    return ORJSONResponse(content=get_app_info(channel_names))
