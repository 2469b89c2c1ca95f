"""Integration tests: unhandled handler faults become JSON 500 responses."""

from __future__ import annotations

import logging

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.main import create_app


def _app_with_failing_route() -> FastAPI:
    app = create_app()

    @app.get("/boom")
    async def boom() -> None:
        raise RuntimeError("database exploded")

    return app


def test_fault_in_development_discloses_detail(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.ERROR, logger="app.errors")

    with TestClient(_app_with_failing_route()) as client:
        res = client.get("/boom", headers={"X-Request-ID": "req_boom_1"})

    assert res.status_code == 500
    assert res.json() == {"error": "Something went wrong!", "message": "database exploded"}

    records = [r for r in caplog.records if r.name == "app.errors"]
    assert len(records) == 1
    assert records[0].exc_info
    assert records[0].__dict__["request_id"] == "req_boom_1"
    assert records[0].__dict__["request_path"] == "/boom"


def test_fault_in_production_hides_detail(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NODE_ENV", "production")

    with TestClient(_app_with_failing_route()) as client:
        res = client.get("/boom")

    assert res.status_code == 500
    assert res.json() == {"error": "Something went wrong!", "message": "Internal server error"}
    assert "database exploded" not in res.text


def test_fault_response_keeps_cross_cutting_headers() -> None:
    with TestClient(_app_with_failing_route()) as client:
        res = client.get("/boom", headers={"Origin": "https://example.com"})

    assert res.status_code == 500
    assert res.headers["x-frame-options"] == "SAMEORIGIN"
    assert res.headers["access-control-allow-origin"] == "*"
    assert res.headers["x-request-id"]


def test_service_keeps_serving_after_a_fault() -> None:
    with TestClient(_app_with_failing_route()) as client:
        assert client.get("/boom").status_code == 500
        assert client.get("/health").status_code == 200
