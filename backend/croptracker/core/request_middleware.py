# backend/croptracker/core/request_middleware.py

import time
import uuid

from .logger import logger

REQUEST_ID_HEADER = b"x-request-id"


class RequestLoggingMiddleware:
    """
    ASGI middleware that tags each request with an id, returns it in the
    X-Request-ID header and logs start, response status and duration.

    The completion line is written for failed requests too; when the
    downstream app raised before starting a response it is logged as 500.
    The caller's user id is included once authentication has run.
    """

    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            return await self.app(scope, receive, send)

        request_id = str(uuid.uuid4())
        scope["request_id"] = request_id

        method = scope.get("method", "")
        path = scope.get("path", "")

        start = time.perf_counter()
        logger.info(
            "Incoming request",
            extra={"request_id": request_id, "method": method, "path": path},
        )

        status_code = None

        async def send_wrapper(message):
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message.get("status", 0)
                message["headers"] = list(message.get("headers", [])) + [
                    (REQUEST_ID_HEADER, request_id.encode("utf-8"))
                ]

            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        finally:
            extra = {
                "request_id": request_id,
                "method": method,
                "path": path,
                "status_code": status_code if status_code is not None else 500,
                "duration_ms": round((time.perf_counter() - start) * 1000, 2),
            }
            # set by get_current_user on authenticated routes
            if scope.get("user_id"):
                extra["user_id"] = scope["user_id"]

            logger.info("Request completed", extra=extra)
