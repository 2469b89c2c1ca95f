from __future__ import annotations

from pydantic import BaseModel, Field


class ErrorOut(BaseModel):
    """Body returned when a request handler fails unexpectedly."""

    error: str = Field(
        description="Short, stable error label.",
        examples=["Something went wrong!"],
    )
    message: str = Field(
        description=(
            "Fault detail in development; a generic `Internal server error` everywhere else."
        ),
        examples=["Internal server error"],
    )


class NotFoundOut(BaseModel):
    """Body returned when no route matches the request."""

    error: str = Field(examples=["Route not found"])
    path: str = Field(
        description="Requested path, echoed verbatim (including the query string).",
        examples=["/unknown"],
    )
