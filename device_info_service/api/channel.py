from fastapi import APIRouter, Request
from fastapi.responses import ORJSONResponse

from device_info_service.channel.method_channel import BinaryMessenger, ChannelNotFoundError
from device_info_service.dto.method_call import MethodCall
from device_info_service.dto.method_result import MethodResult
from device_info_service.settings import settings
from device_info_service.utils.utils import setup_logging

log = setup_logging(component_name="api", log_level=settings.LOG_LEVEL)

channel_api = APIRouter(prefix="/api")


@channel_api.post("/channels/{channel_name:path}", response_model=MethodResult, response_class=ORJSONResponse)
def invoke_channel_method(channel_name: str, call: MethodCall, request: Request) -> ORJSONResponse:
    """
        :description: Dispatches a method call to the named channel
        :param channel_name: channel name, may contain slashes (e.g. raseed.com/device_info)
        :param call: method name and optional arguments
        :return: 200 with the result payload, 501 when the method is not implemented,
                 404 when no channel is registered under that name
    """
    messenger: BinaryMessenger | None = getattr(request.app.state, "messenger", None)

    try:
        if messenger is None:
            raise ChannelNotFoundError(channel_name)
        result = messenger.dispatch(channel_name, call)
    except ChannelNotFoundError as e:
        log.warning(str(e))
        return ORJSONResponse(status_code=404, content={"detail": str(e)})

    status_code = 200 if result.is_success else 501
    log.debug("channel=%s method=%s status=%s", channel_name, call.method, result.status)
    return ORJSONResponse(status_code=status_code, content=result.to_response())
