"""API middleware for request processing."""

import logging
import time
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

SESSION_HEADER = "X-Session-ID"


class LoggingMiddleware(BaseHTTPMiddleware):
    """Logs each request with its session key, status and duration."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.monotonic()
        session_id = request.headers.get(SESSION_HEADER, "-")

        logger.info(
            "Request: %s %s",
            request.method,
            request.url.path,
            extra={
                "method": request.method,
                "path": request.url.path,
                "session_id": session_id,
            },
        )

        try:
            response = await call_next(request)
        except Exception as e:
            process_time = time.monotonic() - start_time
            logger.error(
                "Request failed after %.3fs: %s",
                process_time,
                e,
                extra={"session_id": session_id, "process_time_s": round(process_time, 3)},
            )
            raise

        process_time = time.monotonic() - start_time
        logger.info(
            "Response: %s in %.3fs",
            response.status_code,
            process_time,
            extra={
                "session_id": session_id,
                "status_code": response.status_code,
                "process_time_s": round(process_time, 3),
            },
        )
        response.headers["X-Process-Time"] = f"{process_time:.3f}"
        return response
