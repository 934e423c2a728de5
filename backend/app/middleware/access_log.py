"""
Records API - Access Log Middleware
=====================================

What:  Tags every request with an ID (X-Request-ID) and writes one access
       log line when the response is ready.
How:   The ID is taken from the client's X-Request-ID header or generated,
       kept in `request_id_var` so the exception handlers in main.py can
       prefix their log lines with it, and echoed back on the response.

Log line:
    POST / -> 201 in 3.4ms [a1b2c3d4]

5xx responses are logged at ERROR, everything else at INFO. Health checks
are not logged.
"""

import logging
import time
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("records_api.access")

REQUEST_ID_HEADER = "X-Request-ID"

request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class AccessLogMiddleware(BaseHTTPMiddleware):

    quiet_paths = frozenset({"/health"})

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:8]
        request_id_var.set(rid)

        started = time.perf_counter()
        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = rid

        if request.url.path not in self.quiet_paths:
            logger.log(
                logging.ERROR if response.status_code >= 500 else logging.INFO,
                "%s %s -> %d in %.1fms [%s]",
                request.method,
                request.url.path,
                response.status_code,
                (time.perf_counter() - started) * 1000,
                rid,
            )

        return response
