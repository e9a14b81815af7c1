import time

from .logging_config import get_logger


class RequestLoggingMiddleware:
    """Log one line per request with its status and duration."""

    def __init__(self, get_response):
        self.get_response = get_response
        self.logger = get_logger(name="http", component="http")

    def __call__(self, request):
        start_time = time.perf_counter()
        try:
            response = self.get_response(request)
        except Exception:
            duration_ms = (time.perf_counter() - start_time) * 1000
            self.logger.exception(
                "{method} {path} -> unhandled error ({duration:.2f} ms) [client={client}]",
                method=request.method,
                path=request.path,
                duration=duration_ms,
                client=request.META.get("REMOTE_ADDR", "unknown"),
            )
            raise

        duration_ms = (time.perf_counter() - start_time) * 1000
        self.logger.info(
            "{method} {path} -> {status} ({duration:.2f} ms) [client={client}]",
            method=request.method,
            path=request.path,
            status=response.status_code,
            duration=duration_ms,
            client=request.META.get("REMOTE_ADDR", "unknown"),
        )
        return response
