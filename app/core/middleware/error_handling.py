"""Top-level guard that turns unhandled handler faults into JSON 500 responses."""

from __future__ import annotations

import logging

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response
from starlette.types import ASGIApp

from app.api.errors import INTERNAL_ERROR, resolve_error_message
from app.api.schemas import ErrorOut
from app.core.middleware.http_logging import safe_route_label

logger = logging.getLogger("app.errors")


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """Catch any exception raised below this layer and answer with a 500.

    Installed inside the security/CORS/logging middlewares so error responses still
    carry their headers and are logged as a regular completed request.
    """

    def __init__(self, app: ASGIApp, *, is_development: bool):
        super().__init__(app)
        self._is_development = is_development

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:  # noqa: BLE001 - every fault becomes a 500 response
            logger.exception(
                "Unhandled exception in request handler",
                extra={
                    "request_id": getattr(request.state, "request_id", None),
                    "http_method": request.method,
                    "request_path": safe_route_label(request),
                    "status_code": 500,
                },
            )
            body = ErrorOut(
                error=INTERNAL_ERROR,
                message=resolve_error_message(exc, is_development=self._is_development),
            )
            return JSONResponse(status_code=500, content=body.model_dump())
