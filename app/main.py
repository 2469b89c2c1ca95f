from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.exception_handlers import register_exception_handlers
from app.core.context import AppContext
from app.core.logging import setup_logging
from app.core.metrics import PrometheusMetricsMiddleware, metrics_router
from app.core.middleware.error_handling import ErrorHandlingMiddleware
from app.core.middleware.http_logging import HttpLoggingMiddleware
from app.core.middleware.security_headers import SecurityHeadersMiddleware
from app.core.settings import Settings, get_settings
from app.status.router import router as status_router

setup_logging(get_settings().log_level)

logger = logging.getLogger("app.main")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    context = AppContext.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Server running on port %s", context.port)
        logger.info("Health check: http://localhost:%s/health", context.port)
        logger.info("Environment: %s", context.environment_name)
        yield
        logger.info("Server shutting down")

    app = FastAPI(
        title="DevOps CI/CD Demo API",
        description=(
            "Minimal demonstration service used to exercise a build, test and deploy pipeline.\n\n"
            "- Every endpoint answers from memory; there are no downstream dependencies.\n"
            "- Unknown routes return a JSON 404 echoing the requested path.\n"
            "- Fault details are only disclosed to clients in development."
        ),
        version=settings.app_version,
        lifespan=lifespan,
        # "/health/" is a different path and must answer 404, not redirect.
        redirect_slashes=False,
        # Docs are opt-in so the public route table is exactly /, /health and /api/status.
        docs_url="/swagger" if settings.docs_enabled else None,
        redoc_url=None,
        openapi_url="/openapi.json" if settings.docs_enabled else None,
        openapi_tags=[
            {"name": "root", "description": "Welcome message and version."},
            {
                "name": "health",
                "description": "Basic uptime check for load balancers and orchestrators.",
            },
            {"name": "status", "description": "Application and runtime metadata."},
            {"name": "monitoring", "description": "Prometheus-compatible metrics endpoint."},
        ],
    )
    app.state.context = context

    # Starlette wraps in reverse order: the last middleware added is the outermost.
    app.add_middleware(ErrorHandlingMiddleware, is_development=context.is_development)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(PrometheusMetricsMiddleware)
    app.add_middleware(HttpLoggingMiddleware)

    register_exception_handlers(app)

    app.include_router(status_router)
    if settings.metrics_enabled:
        app.include_router(metrics_router)
    return app


app = create_app()
