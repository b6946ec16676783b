"""
WSGI entry point, served by gunicorn (see gunicorn.conf.py).
Wraps the FastAPI app with a2wsgi and screens request paths before dispatch.
"""
import re

from a2wsgi import ASGIMiddleware

from device_info_service.app import create_app
from device_info_service.settings import settings
from device_info_service.utils.utils import setup_logging

log = setup_logging(component_name="wsgi", log_level=settings.LOG_LEVEL)

asgi_app = create_app()
asgi_middleware = ASGIMiddleware(asgi_app)  # type: ignore[arg-type]

# traversal, NUL and scanner paths; channel names never contain these
_BLOCKED_PATH = re.compile(r"(%2e%2e|%00|\${jndi:|/winnt/|/etc/passwd)", re.I)


def _plain_text(start_response, status: str, body: bytes) -> list[bytes]:
    start_response(status, [("Content-Type", "text/plain"), ("Content-Length", str(len(body)))])
    return [body]


def app(environ, start_response):
    path = environ.get("PATH_INFO", "")
    try:
        if _BLOCKED_PATH.search(path):
            log.warning("blocked request path: %r", path)
            return _plain_text(start_response, "400 Bad Request", b"Bad Request: blocked")

        return asgi_middleware(environ, start_response)

    except UnicodeDecodeError:
        log.warning("malformed request path: %r", path)
        return _plain_text(start_response, "400 Bad Request", b"Bad Request: malformed path")

    except Exception:
        log.exception("unhandled error while serving %r", path)
        return _plain_text(start_response, "500 Internal Server Error", b"Internal Server Error")
