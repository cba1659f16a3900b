"""
Correlation ID Middleware

Injects correlation IDs into requests so every log line of a triggered
pipeline run can be traced back to the HTTP call that started it.
"""

import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from core.logging import set_correlation_id


class CorrelationMiddleware(BaseHTTPMiddleware):
    """
    Middleware to inject and propagate correlation IDs.

    - Reads X-Correlation-ID from incoming request headers
    - Generates a new UUID if not present
    - Adds X-Correlation-ID to response headers
    """

    HEADER_NAME = "X-Correlation-ID"

    async def dispatch(self, request: Request, call_next) -> Response:
        correlation_id = request.headers.get(self.HEADER_NAME) or str(uuid.uuid4())
        set_correlation_id(correlation_id)

        response = await call_next(request)
        response.headers[self.HEADER_NAME] = correlation_id

        return response
