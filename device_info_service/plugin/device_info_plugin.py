from __future__ import annotations

from device_info_service.channel.method_channel import BinaryMessenger, MethodChannel
from device_info_service.dto.device_info import DeviceInfo
from device_info_service.dto.method_call import MethodCall
from device_info_service.dto.method_result import MethodResult
from device_info_service.host.build import (
    PROP_RELEASE,
    PROP_SDK_INT,
    BuildPropertyReader,
    get_int,
    get_product_string,
    get_string,
)
from device_info_service.settings import settings
from device_info_service.utils.utils import setup_logging

CHANNEL = "raseed.com/device_info"
METHOD_GET_DEVICE_INFO = "getDeviceInfo"


class DeviceInfoPlugin:
    """Answers `getDeviceInfo` on the device info channel from host build metadata."""

    def __init__(self, reader: BuildPropertyReader | None = None) -> None:
        self.log = setup_logging(component_name="device_info_plugin", log_level=settings.LOG_LEVEL)
        self.reader = reader if reader is not None else BuildPropertyReader()

    @classmethod
    def register_with(cls, messenger: BinaryMessenger, reader: BuildPropertyReader | None = None) -> DeviceInfoPlugin:
        """
            :description: Creates the device info channel on the messenger and attaches the handler
            :param messenger: messenger the channel is registered on
            :param reader: optional host property reader, defaults to one built from settings
            :return: the registered plugin instance
        """
        plugin = cls(reader=reader)
        channel = MethodChannel(messenger, CHANNEL)
        channel.set_method_call_handler(plugin.on_method_call)
        return plugin

    def on_method_call(self, call: MethodCall) -> MethodResult:
        return self.handle(call.method)

    def handle(self, method_name: str) -> MethodResult:
        if method_name == METHOD_GET_DEVICE_INFO:
            device_info = self.read_device_info()
            return MethodResult.success(device_info.model_dump(by_alias=True))

        self.log.debug("method not implemented on %s: %r", CHANNEL, method_name)
        return MethodResult.not_implemented()

    def read_device_info(self) -> DeviceInfo:
        props = self.reader.read()
        return DeviceInfo(
            sdkInt=get_int(props, PROP_SDK_INT),
            model=get_product_string(props, "model"),
            manufacturer=get_product_string(props, "manufacturer"),
            brand=get_product_string(props, "brand"),
            device=get_product_string(props, "device"),
            androidVersion=get_string(props, PROP_RELEASE),
        )
