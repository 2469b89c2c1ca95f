from __future__ import annotations

from fastapi import APIRouter, Depends

from app.core.context import AppContext, get_app_context
from app.status.schemas import HealthOut, StatusOut, WelcomeOut
from app.status.service import build_health, build_status, build_welcome

router = APIRouter()


@router.get(
    "/",
    response_model=WelcomeOut,
    tags=["root"],
    summary="Welcome message",
    description="Returns the welcome message, application version and environment.",
)
async def get_root(context: AppContext = Depends(get_app_context)) -> WelcomeOut:
    return build_welcome(context=context)


@router.get(
    "/health",
    response_model=HealthOut,
    tags=["health"],
    summary="Health check",
    description=(
        "Lightweight endpoint to verify the API process is running.\n\n"
        "This endpoint intentionally does not check any dependencies so it can be used "
        "safely for liveness and readiness probes."
    ),
)
async def get_health(context: AppContext = Depends(get_app_context)) -> HealthOut:
    return build_health(context=context)


@router.get(
    "/api/status",
    response_model=StatusOut,
    tags=["status"],
    summary="Detailed status",
    description="Reports application name, version, environment and runtime metadata.",
)
async def get_status(context: AppContext = Depends(get_app_context)) -> StatusOut:
    return build_status(context=context)
