from fastapi import FastAPI
from fastapi.responses import ORJSONResponse

from device_info_service.api.api import api
from device_info_service.channel.method_channel import BinaryMessenger
from device_info_service.host.build import BuildPropertyReader
from device_info_service.plugin.device_info_plugin import DeviceInfoPlugin
from device_info_service.settings import settings
from device_info_service.utils.utils import setup_logging

log = setup_logging(component_name="app", log_level=settings.LOG_LEVEL)


def register_plugins(messenger: BinaryMessenger, reader: BuildPropertyReader | None = None) -> None:
    """
        :description: Registers every plugin channel handler on the messenger
        :param messenger: messenger shared by the application
        :param reader: optional host property reader passed to the plugins
    """
    DeviceInfoPlugin.register_with(messenger, reader=reader)


def create_app(reader: BuildPropertyReader | None = None) -> FastAPI:
    """
        :description: Creates FastAPI application with API router and registers the method channels
        :param reader: optional host property reader, defaults to one built from settings
        :return: FastAPI application instance
    """

    app = FastAPI(title="Device Info Service",
                  description="Device Info Service API",
                  version=settings.SERVICE_VERSION,
                  default_response_class=ORJSONResponse,
                  debug=settings.DEBUG_MODE)
    app.include_router(api)

    messenger = BinaryMessenger()
    register_plugins(messenger, reader=reader)
    app.state.messenger = messenger

    log.info("registered channels: %s", ", ".join(messenger.channel_names()))

    return app
