"""API tests for health, diagnostics and CORS behaviour."""

from __future__ import annotations

import pytest

from app.interfaces.api.routes import diagnostics as diagnostics_routes


def test_diagnostic_echoes_request(client) -> None:
    response = client.get("/api/diagnostic", params={"check": "1"})

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "success"
    assert body["method"] == "GET"
    assert body["url"].endswith("/api/diagnostic?check=1")
    assert body["timestamp"]


def test_health_reports_environment(client) -> None:
    response = client.get("/api/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["environment"] == "development"


def test_cors_headers_on_simple_request(client) -> None:
    response = client.get("/api/health", headers={"Origin": "https://app.example"})

    assert response.headers["access-control-allow-origin"] == "*"


def test_cors_preflight_returns_ok(client) -> None:
    response = client.options(
        "/api/business/tax-info",
        headers={
            "Origin": "https://app.example",
            "Access-Control-Request-Method": "PUT",
            "Access-Control-Request-Headers": "authorization, content-type",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"
    allowed_methods = response.headers["access-control-allow-methods"]
    for method in ("GET", "POST", "PUT", "DELETE", "OPTIONS"):
        assert method in allowed_methods
    allowed_headers = response.headers["access-control-allow-headers"].lower()
    for header in ("authorization", "x-client-info", "apikey", "content-type"):
        assert header in allowed_headers


def test_plain_options_request_returns_ok(client) -> None:
    response = client.options("/api/notifications/send")

    assert response.status_code == 200


def test_unknown_route_uses_error_envelope(client) -> None:
    response = client.get("/api/does-not-exist")

    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}


@pytest.mark.parametrize(
    "request_headers",
    [
        {
            "Access-Control-Request-Method": "PUT",
            "Access-Control-Request-Headers": "content-type, x-requested-with",
        },
        {"Access-Control-Request-Method": "PATCH"},
    ],
)
def test_preflight_outside_allow_list_still_returns_ok(client, request_headers) -> None:
    response = client.options(
        "/api/business/tax-info",
        headers={"Origin": "https://app.example", **request_headers},
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"
    assert response.headers["access-control-allow-methods"] == "GET, POST, PUT, DELETE, OPTIONS"


def test_unexpected_error_envelope_carries_cors_headers(client, monkeypatch, caplog) -> None:
    def broken_health_status():
        raise KeyError("boom")

    monkeypatch.setattr(diagnostics_routes, "health_status", broken_health_status)

    with caplog.at_level("ERROR"):
        response = client.get("/api/health", headers={"Origin": "https://app.example"})

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error", "details": "'boom'"}
    assert response.headers["access-control-allow-origin"] == "*"
    assert "Unhandled error on GET /api/health" in caplog.text
