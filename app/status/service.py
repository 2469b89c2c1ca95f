from __future__ import annotations

import platform
import sys
from datetime import UTC, datetime

from app.core.context import AppContext
from app.status.schemas import HealthOut, StatusDataOut, StatusOut, WelcomeOut


def format_timestamp(moment: datetime) -> str:
    """Format a UTC instant as ISO-8601 with millisecond precision and a `Z` suffix."""

    return moment.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _now() -> str:
    return format_timestamp(datetime.now(UTC))


def build_welcome(*, context: AppContext) -> WelcomeOut:
    return WelcomeOut(
        message=context.welcome_message,
        version=context.version,
        timestamp=_now(),
        environment=context.environment_name,
    )


def build_health(*, context: AppContext) -> HealthOut:
    # No dependency checks: if this runs, the process is healthy.
    return HealthOut(
        status="healthy",
        timestamp=_now(),
        uptime=context.uptime_seconds(),
        environment=context.environment_name,
    )


def build_status(*, context: AppContext) -> StatusOut:
    return StatusOut(
        status="success",
        data=StatusDataOut(
            app=context.app_name,
            version=context.version,
            environment=context.environment_name,
            runtime_version=platform.python_version(),
            platform=sys.platform,
        ),
    )
