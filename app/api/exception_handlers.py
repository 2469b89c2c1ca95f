from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.errors import ROUTE_NOT_FOUND
from app.api.schemas import NotFoundOut

logger = logging.getLogger("app.routing")

# A known path requested with the wrong method is still a routing miss.
_ROUTING_MISS_STATUSES = frozenset({404, 405})


def original_url(request: Request) -> str:
    """Return the request target as the client sent it (path plus query string)."""

    raw_path = request.scope.get("raw_path")
    path = raw_path.decode("latin-1") if raw_path else request.url.path
    query = request.scope.get("query_string", b"")
    if query:
        return f"{path}?{query.decode('latin-1')}"
    return path


def register_exception_handlers(app: FastAPI) -> None:
    """Register application exception handlers."""

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        request: Request,
        exc: StarletteHTTPException,
    ) -> JSONResponse:
        if exc.status_code in _ROUTING_MISS_STATUSES:
            logger.info(
                "Route not found",
                extra={
                    "request_id": getattr(request.state, "request_id", None),
                    "http_method": request.method,
                    "request_path": "unmatched",
                    "status_code": 404,
                },
            )
            body = NotFoundOut(error=ROUTE_NOT_FOUND, path=original_url(request))
            return JSONResponse(status_code=404, content=body.model_dump())

        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=exc.headers,
        )
