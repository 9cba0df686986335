# =============================================================================
# app/middleware/ - HTTP Middleware
# =============================================================================
# - request_logging.py: Logs path, content length and (small) bodies
# =============================================================================

from .request_logging import RequestLoggingMiddleware

__all__ = [
    "RequestLoggingMiddleware",
]
