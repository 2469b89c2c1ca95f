from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class WelcomeOut(BaseModel):
    message: str = Field(
        description="Static welcome message.",
        examples=["Welcome to DevOps CI/CD Demo App!"],
    )
    version: str = Field(description="Application version.", examples=["1.0.0"])
    timestamp: str = Field(
        description="Response generation time (UTC, ISO-8601).",
        examples=["2026-10-18T09:30:00.123Z"],
    )
    environment: str = Field(description="Runtime environment name.", examples=["development"])


class HealthOut(BaseModel):
    """Health check response."""

    status: Literal["healthy"] = Field(
        description="Always `healthy` while the process is able to answer requests.",
        examples=["healthy"],
    )
    timestamp: str = Field(
        description="Response generation time (UTC, ISO-8601).",
        examples=["2026-10-18T09:30:00.123Z"],
    )
    uptime: float = Field(
        ge=0,
        description="Seconds since the application started.",
        examples=[12.345],
    )
    environment: str = Field(description="Runtime environment name.", examples=["development"])


class StatusDataOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    app: str = Field(examples=["DevOps CI/CD Demo"])
    version: str = Field(examples=["1.0.0"])
    environment: str = Field(examples=["development"])
    # Wire name kept camelCase to match the rest of the public payloads.
    runtime_version: str = Field(
        alias="runtimeVersion",
        description="Python interpreter version serving the request.",
        examples=["3.12.4"],
    )
    platform: str = Field(description="Host platform identifier.", examples=["linux"])


class StatusOut(BaseModel):
    status: Literal["success"] = Field(examples=["success"])
    data: StatusDataOut
