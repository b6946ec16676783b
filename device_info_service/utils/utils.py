"""Utility helpers for the device info service.

Shared by the API, channel and host layers: application info shaping for the
`/api/info` endpoint and the stdout logging setup used by every component.
"""

import logging
import sys

from device_info_service.settings import settings

SERVICE_APP_NAME = "device-info-service"


def get_app_info(channel_names: list[str] | None = None) -> dict:
    """Return general information about the application.

    Used by the `/api/info` endpoint.

    Args:
        channel_names: Names of the method channels currently registered.

    Returns:
        dict: Application information (name, version, channels, config placeholder).
    """
    return {"service_app_name": SERVICE_APP_NAME,
            "service_version": settings.SERVICE_VERSION,
            "channels": sorted(channel_names or []),
            "config": ""}


def setup_logging(component_name: str = "config_logger", log_level: int = 20) -> logging.Logger:
    """Configure a logger that writes to stdout with a consistent format.

    Args:
        component_name: Logger name to configure.
        log_level: Logging level to set on the logger and handler.

    Returns:
        logging.Logger: Configured logger instance.
    """
    root_logger = logging.getLogger(component_name)
    log_format = '[%(asctime)s] [%(levelname)s] %(name)s: %(message)s'
    log_handler = logging.StreamHandler(sys.stdout)
    log_handler.setFormatter(logging.Formatter(fmt=log_format))
    log_handler.setLevel(level=log_level)
    root_logger.setLevel(level=log_level)
    root_logger.propagate = False

    # only add the handler if a previous one does not exists
    handler_exists = False
    for h in root_logger.handlers:
        if isinstance(h, logging.StreamHandler) and h.level is log_handler.level:
            handler_exists = True
            break

    if not handler_exists:
        root_logger.addHandler(log_handler)

    return root_logger
