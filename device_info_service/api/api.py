from fastapi import APIRouter

from device_info_service.api.channel import channel_api
from device_info_service.api.health import health_api

api = APIRouter()

api.include_router(health_api)
api.include_router(channel_api)
