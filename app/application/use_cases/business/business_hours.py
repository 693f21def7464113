"""Use cases for the weekly opening hours of a business."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain.entities import BusinessProfile
from app.domain.exceptions import (
    NotFoundError,
    RequestValidationFailed,
    UpstreamServiceError,
)
from app.infrastructure.repositories import BusinessProfileRepository

WEEKDAYS: tuple[str, ...] = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)
DEFAULT_OPEN = "09:00"
DEFAULT_CLOSE = "17:00"


def default_business_hours() -> dict[str, dict[str, Any]]:
    return {
        day: {"open": DEFAULT_OPEN, "close": DEFAULT_CLOSE, "closed": day == "sunday"}
        for day in WEEKDAYS
    }


def hours_from_storage(stored: Mapping[str, Any] | None) -> dict[str, dict[str, Any]]:
    """Convert stored hours (``"Monday"`` keys) to the lower-case API shape.

    Days missing from storage keep the default schedule; unknown keys are
    dropped.
    """

    hours = default_business_hours()
    for day, value in (stored or {}).items():
        key = str(day).lower()
        if key not in hours or not isinstance(value, Mapping):
            continue
        closed = value.get("closed")
        hours[key] = {
            "open": value.get("open") or DEFAULT_OPEN,
            "close": value.get("close") or DEFAULT_CLOSE,
            "closed": bool(closed) if closed is not None else False,
        }
    return hours


def hours_to_storage(hours: Mapping[str, Any]) -> dict[str, dict[str, Any]]:
    """Convert API hours to the capitalised storage shape."""

    stored: dict[str, dict[str, Any]] = {}
    for day, value in hours.items():
        if not isinstance(value, Mapping):
            raise RequestValidationFailed(
                "Invalid business hours", details=f"Expected an object for '{day}'"
            )
        name = str(day)
        closed = value.get("closed")
        stored[name[:1].upper() + name[1:]] = {
            "open": value.get("open"),
            "close": value.get("close"),
            "closed": bool(closed) if closed is not None else False,
        }
    return stored


def _load_business(session: Session, business_id: str) -> BusinessProfile:
    try:
        profile = BusinessProfileRepository(session).get(business_id)
    except SQLAlchemyError as exc:
        raise UpstreamServiceError(
            "Failed to fetch business hours", details=str(exc)
        ) from exc
    if profile is None:
        raise NotFoundError("Business not found")
    return profile


def get_business_hours(session: Session, *, business_id: str) -> BusinessProfile:
    """Return the business with its hours in the API shape."""

    if not business_id:
        raise RequestValidationFailed("business_id parameter is required")
    profile = _load_business(session, business_id)
    profile.business_hours = hours_from_storage(profile.business_hours)
    return profile


def update_business_hours(
    session: Session,
    *,
    business_id: str,
    business_hours: Mapping[str, Any] | None,
) -> BusinessProfile:
    """Replace the stored hours of ``business_id``."""

    if not business_id:
        raise RequestValidationFailed("business_id is required")
    if not isinstance(business_hours, Mapping):
        raise RequestValidationFailed("business_hours object is required")

    stored = hours_to_storage(business_hours)
    repository = BusinessProfileRepository(session)
    try:
        updated = repository.update_hours(business_id, stored)
    except SQLAlchemyError as exc:
        session.rollback()
        raise UpstreamServiceError(
            "Failed to update business hours", details=str(exc)
        ) from exc
    if not updated:
        raise NotFoundError("Business not found")

    return get_business_hours(session, business_id=business_id)


__all__ = [
    "WEEKDAYS",
    "default_business_hours",
    "get_business_hours",
    "hours_from_storage",
    "hours_to_storage",
    "update_business_hours",
]
