from __future__ import annotations

import logging
import time
import uuid
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request


logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "x-request-id"


class RequestIDLoggingMiddleware(BaseHTTPMiddleware):
    """Tag each request with an id, log it on the way in and out.

    A client-supplied ``x-request-id`` is reused so solver runs can be traced
    across services; otherwise a fresh UUID is assigned.
    """

    async def dispatch(self, request: Request, call_next: Callable):
        start = time.perf_counter()
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id

        logger.info(
            "request",
            extra={
                "request_id": request_id,
                "method": request.method,
                "path": request.url.path,
            },
        )

        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id

        logger.info(
            "response",
            extra={
                "request_id": request_id,
                "status_code": response.status_code,
                "duration_ms": int((time.perf_counter() - start) * 1000),
            },
        )
        return response
