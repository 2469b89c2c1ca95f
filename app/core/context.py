"""Per-process application context.

Handlers read runtime configuration and process metadata from an explicit
`AppContext` stored on `app.state` instead of reaching for environment variables
or module-level globals.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field

from fastapi import Request

from app.core.settings import Settings


def _is_development(environment_name: str) -> bool:
    return environment_name.strip().lower() == "development"


@dataclass(frozen=True)
class AppContext:
    port: int
    environment_name: str
    app_name: str
    version: str
    welcome_message: str
    # Monotonic clock reading taken when the application was created.
    start_time: float = field(default_factory=time.monotonic)

    @classmethod
    def from_settings(cls, settings: Settings) -> AppContext:
        return cls(
            port=settings.port,
            environment_name=settings.app_env,
            app_name=settings.app_name,
            version=settings.app_version,
            welcome_message=settings.welcome_message,
        )

    @property
    def is_development(self) -> bool:
        return _is_development(self.environment_name)

    def uptime_seconds(self, *, now: float | None = None) -> float:
        current = time.monotonic() if now is None else now
        return max(0.0, current - self.start_time)


def get_app_context(request: Request) -> AppContext:
    """Dependency provider for the context created in `create_app()`."""

    return request.app.state.context
