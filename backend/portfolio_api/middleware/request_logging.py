import logging
import time

from flask import g, request

logger = logging.getLogger(__name__)


def request_logging_middleware(app):
    @app.before_request
    def start_timer():
        g.request_started_at = time.perf_counter()

    @app.after_request
    def log_request(response):
        started = getattr(g, "request_started_at", None)
        elapsed_ms = (time.perf_counter() - started) * 1000 if started else 0.0

        logger.info(
            "%s %s -> %s (%.1f ms)",
            request.method, request.path, response.status_code, elapsed_ms
        )
        return response
