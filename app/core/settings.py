from __future__ import annotations

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = Field(
        default="DevOps CI/CD Demo",
        validation_alias=AliasChoices("APP_NAME", "app_name"),
        description="Application name reported by /api/status.",
    )
    app_version: str = Field(
        default="1.0.0",
        validation_alias=AliasChoices("APP_VERSION", "app_version"),
        description="Version string reported by / and /api/status.",
    )
    welcome_message: str = Field(
        default="Welcome to DevOps CI/CD Demo App!",
        validation_alias=AliasChoices("WELCOME_MESSAGE", "welcome_message"),
        description="Message returned by the root endpoint.",
    )
    app_env: str = Field(
        default="development",
        validation_alias=AliasChoices("NODE_ENV", "APP_ENV", "app_env"),
        description="Runtime environment: development|production.",
    )

    # Network binding
    host: str = Field(
        default="0.0.0.0",
        validation_alias=AliasChoices("HOST", "host"),
        description="Interface the HTTP server binds to.",
    )
    port: int = Field(
        default=3000,
        ge=1,
        le=65535,
        validation_alias=AliasChoices("PORT", "port"),
        description="TCP port the HTTP server listens on.",
    )

    cors_allow_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        validation_alias=AliasChoices("CORS_ALLOW_ORIGINS", "cors_allow_origins"),
        description="Origins allowed to call the API from a browser.",
    )

    # Optional operational surfaces. Off by default so the public route table stays minimal.
    metrics_enabled: bool = Field(
        default=False,
        validation_alias=AliasChoices("METRICS_ENABLED", "metrics_enabled"),
        description="Expose Prometheus metrics at /metrics.",
    )
    docs_enabled: bool = Field(
        default=False,
        validation_alias=AliasChoices("DOCS_ENABLED", "docs_enabled"),
        description="Expose Swagger UI at /swagger and the schema at /openapi.json.",
    )

    log_level: str = Field(
        default="INFO",
        validation_alias=AliasChoices("LOG_LEVEL", "log_level"),
        description="Root log level.",
    )

    @property
    def is_development(self) -> bool:
        return str(self.app_env).strip().lower() == "development"


@lru_cache
def get_settings() -> Settings:
    return Settings()
