# =============================================================================
# app/middleware/request_logging.py - Request Logging Middleware
# =============================================================================
# Logs every incoming request before it reaches a route:
# - path and declared content length
# - the body itself, unless it is larger than MAX_REQUEST_BODY_SIZE_TO_LOG
#
# The body is read through Request.body(), which Starlette caches, so the
# route handler still receives it intact.
# =============================================================================

import logging
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log incoming HTTP requests."""

    async def dispatch(
        self,
        request: Request,
        call_next: Callable
    ) -> Response:
        """Log the request, then hand it on unchanged."""
        await self.log_request(request)
        return await call_next(request)

    async def log_request(self, request: Request) -> None:
        max_content_length = request.app.state.settings.MAX_REQUEST_BODY_SIZE_TO_LOG

        logger.info(f"Request Path: {request.url.path}")

        try:
            content_length = int(request.headers.get("content-length") or 0)
        except ValueError:
            content_length = 0
        logger.info(f"Request Content Length: {content_length}")

        if content_length == 0:
            return

        if content_length > max_content_length:
            logger.warning(
                f"Request body size of '{content_length}' exceeds maximum configured value "
                f"'{max_content_length}'...omitting body from logs."
            )
            return

        body = await request.body()
        logger.info(f"Request body: {body.decode('utf-8', errors='replace')}")
