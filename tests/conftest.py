from __future__ import annotations

from collections.abc import Iterator

import pytest

# Importing app.main configures logging once, at collection time, so it never replaces
# the pytest capture handler in the middle of a test.
from app.main import create_app

_APP_ENV_VARS = (
    "NODE_ENV",
    "APP_ENV",
    "PORT",
    "HOST",
    "APP_NAME",
    "APP_VERSION",
    "WELCOME_MESSAGE",
    "CORS_ALLOW_ORIGINS",
    "METRICS_ENABLED",
    "DOCS_ENABLED",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in _APP_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # Settings are cached via @lru_cache; clear so each test sees its own environment.
    from app.core.settings import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def client():
    from fastapi.testclient import TestClient

    app = create_app()
    with TestClient(app) as c:
        yield c
