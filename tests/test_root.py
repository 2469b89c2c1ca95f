from __future__ import annotations


def test_root_returns_welcome_message(client) -> None:
    res = client.get("/")
    assert res.status_code == 200

    body = res.json()
    assert body["message"] == "Welcome to DevOps CI/CD Demo App!"
    assert body["version"] == "1.0.0"
    assert body["environment"] == "development"
    assert isinstance(body["timestamp"], str)
    assert set(body) == {"message", "version", "timestamp", "environment"}


def test_root_is_stable_except_for_timestamp(client) -> None:
    first = client.get("/").json()
    second = client.get("/").json()

    assert second["timestamp"] >= first["timestamp"]
    first.pop("timestamp")
    second.pop("timestamp")
    assert first == second


def test_root_sets_request_id_header(client) -> None:
    res = client.get("/")
    assert res.headers["x-request-id"]
