import logging
import sys
import time

from fastapi import Request

from contacts_api.config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

logger = logging.getLogger("contacts_api.request")


def setup_logging(level: str = LOG_LEVEL) -> None:
    """
    Налаштовує кореневий логер: один обробник у stdout та рівень з конфігурації.

    Повторний виклик не додає ще один обробник.
    """
    root = logging.getLogger()
    root.setLevel(level.upper())
    if not any(handler.get_name() == "contacts_api" for handler in root.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler.set_name("contacts_api")
        root.addHandler(handler)


async def log_requests(request: Request, call_next):
    """Логує метод, шлях, статус та тривалість кожного запиту."""
    start = time.perf_counter()
    response = await call_next(request)
    duration_ms = (time.perf_counter() - start) * 1000
    logger.info("%s %s %s %.1fms", request.method, request.url.path, response.status_code, duration_ms)
    return response
