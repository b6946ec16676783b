from device_info_service.settings import settings
from device_info_service.utils.utils import setup_logging

log = setup_logging(component_name="gunicorn_hooks", log_level=settings.LOG_LEVEL)

wsgi_app = "wsgi:app"
bind = f"{settings.HOST}:{settings.PORT}"
workers = settings.WEB_SERVICE_WORKERS
worker_class = "sync"
timeout = 30


def post_fork(server, worker):
    log.info("worker spawned pid=%s bind=%s", worker.pid, bind)


def worker_exit(server, worker):
    log.info("worker exited pid=%s", worker.pid)
