# playarena/core/logging.py
import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware

from playarena.core.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s - %(message)s"

logger = logging.getLogger("playarena.access")


def setup_logging(level: str | None = None) -> None:
    level = (level or settings.LOG_LEVEL).upper()
    if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        level = "INFO"
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("playarena").setLevel(level)


class AccessLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request, call_next):
        t0 = time.perf_counter()
        status = 500
        try:
            response = await call_next(request)
            status = response.status_code
            return response
        finally:
            dt = (time.perf_counter() - t0) * 1000
            logger.info(
                "ACCESS %s %s q=%s -> %s in %.1fms",
                request.method,
                request.url.path,
                request.url.query,
                status,
                dt,
            )
