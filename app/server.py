"""Process entry point: serve the application with uvicorn."""

from __future__ import annotations

import uvicorn

from app.core.settings import get_settings


def run() -> None:
    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        # Logging is configured by app.core.logging; keep uvicorn from replacing it.
        log_config=None,
    )
