"""Health and diagnostic payloads that never touch external services."""

from __future__ import annotations

from typing import Any

from app.config import get_settings
from app.utils import now_in_app_timezone


def health_status() -> dict[str, Any]:
    return {
        "status": "healthy",
        "timestamp": now_in_app_timezone().isoformat(),
        "environment": get_settings().environment,
    }


def diagnostic_report(*, method: str, url: str) -> dict[str, Any]:
    """Echo the request so clients can confirm the API is reachable."""

    return {
        "status": "success",
        "message": "API is reachable",
        "method": method,
        "url": url,
        "timestamp": now_in_app_timezone().isoformat(),
    }


__all__ = ["diagnostic_report", "health_status"]
