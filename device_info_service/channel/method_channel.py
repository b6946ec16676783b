from __future__ import annotations

from collections.abc import Callable

from device_info_service.dto.method_call import MethodCall
from device_info_service.dto.method_result import MethodResult
from device_info_service.settings import settings
from device_info_service.utils.utils import setup_logging

MethodCallHandler = Callable[[MethodCall], MethodResult]

log = setup_logging(component_name="channel", log_level=settings.LOG_LEVEL)


class ChannelNotFoundError(LookupError):
    """Raised when a call targets a channel nobody registered."""

    def __init__(self, channel_name: str) -> None:
        super().__init__(f"no method channel registered under '{channel_name}'")
        self.channel_name = channel_name


class BinaryMessenger:
    """Routes method calls to the channels registered by name."""

    def __init__(self) -> None:
        self._channels: dict[str, MethodChannel] = {}

    def set_channel(self, channel: MethodChannel) -> None:
        self._channels[channel.name] = channel

    def has_channel(self, channel_name: str) -> bool:
        return channel_name in self._channels

    def channel_names(self) -> list[str]:
        return list(self._channels)

    def dispatch(self, channel_name: str, call: MethodCall) -> MethodResult:
        channel = self._channels.get(channel_name)
        if channel is None:
            raise ChannelNotFoundError(channel_name)
        return channel.invoke_method(call)


class MethodChannel:
    """A named channel on a messenger with at most one method call handler."""

    def __init__(self, messenger: BinaryMessenger, name: str) -> None:
        if not name:
            raise ValueError("method channel name must not be empty")
        self.messenger = messenger
        self.name = name
        self._handler: MethodCallHandler | None = None
        # a fresh channel answers not_implemented until a handler is attached
        if not messenger.has_channel(name):
            messenger.set_channel(self)

    def set_method_call_handler(self, handler: MethodCallHandler | None) -> None:
        """Attach a handler to this channel, or detach it by passing None.

        The channel stays registered either way, a detached channel answers not_implemented.
        """
        self._handler = handler
        self.messenger.set_channel(self)
        log.info("method call handler %s on channel %s", "attached" if handler else "detached", self.name)

    def invoke_method(self, call: MethodCall) -> MethodResult:
        if self._handler is None:
            log.debug("channel %s has no handler, method %s not implemented", self.name, call.method)
            return MethodResult.not_implemented()
        return self._handler(call)
