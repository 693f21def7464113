"""Use cases for reading and updating notification settings."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import replace

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain.entities import CHANNELS, NOTIFICATION_TYPES, UserSettings
from app.domain.exceptions import RequestValidationFailed, UpstreamServiceError
from app.infrastructure.repositories import UserSettingsRepository
from app.utils import parse_clock_time


def valid_preference_keys() -> frozenset[str]:
    return frozenset(
        rule.channel_rule(channel).preference_key
        for rule in NOTIFICATION_TYPES.values()
        for channel in CHANNELS
    )


def _validate_clock(field_name: str, value: str | None) -> str | None:
    if value is None or value == "":
        return None
    parsed = parse_clock_time(value)
    if parsed is None:
        raise RequestValidationFailed(
            "Invalid quiet hours", details=f"{field_name} must use the HH:MM format"
        )
    return parsed.strftime("%H:%M")


def _validate_preferences(preferences: Mapping[str, object]) -> dict[str, bool]:
    allowed = valid_preference_keys()
    unknown = sorted(key for key in preferences if key not in allowed)
    if unknown:
        raise RequestValidationFailed(
            "Unknown notification preferences", details=", ".join(unknown)
        )
    return {key: bool(value) for key, value in preferences.items()}


def get_user_settings(session: Session, *, user_id: str) -> UserSettings | None:
    if not user_id:
        raise RequestValidationFailed("Missing required fields", details="user_id")
    try:
        return UserSettingsRepository(session).get_by_user_id(user_id)
    except SQLAlchemyError as exc:
        raise UpstreamServiceError(
            "Failed to fetch user settings", details=str(exc)
        ) from exc


def update_user_settings(
    session: Session,
    *,
    user_id: str,
    email_notifications: bool | None = None,
    sms_notifications: bool | None = None,
    notification_email: str | None = None,
    notification_phone: str | None = None,
    quiet_hours_enabled: bool | None = None,
    quiet_hours_start: str | None = None,
    quiet_hours_end: str | None = None,
    preferences: Mapping[str, object] | None = None,
) -> UserSettings:
    """Upsert the settings of ``user_id``.

    Only the supplied values change; per-type ``preferences`` are merged into
    the stored map.
    """

    if not user_id:
        raise RequestValidationFailed("Missing required fields", details="user_id")

    repository = UserSettingsRepository(session)
    try:
        current = repository.get_by_user_id(user_id) or UserSettings.defaults_for(user_id)
    except SQLAlchemyError as exc:
        raise UpstreamServiceError(
            "Failed to fetch user settings", details=str(exc)
        ) from exc

    merged_preferences = dict(current.preferences)
    if preferences:
        merged_preferences.update(_validate_preferences(preferences))

    updated = replace(
        current,
        email_notifications=(
            email_notifications
            if email_notifications is not None
            else current.email_notifications
        ),
        sms_notifications=(
            sms_notifications if sms_notifications is not None else current.sms_notifications
        ),
        notification_email=(
            notification_email.strip() or None
            if notification_email is not None
            else current.notification_email
        ),
        notification_phone=(
            notification_phone.strip() or None
            if notification_phone is not None
            else current.notification_phone
        ),
        quiet_hours_enabled=(
            quiet_hours_enabled
            if quiet_hours_enabled is not None
            else current.quiet_hours_enabled
        ),
        quiet_hours_start=(
            _validate_clock("quiet_hours_start", quiet_hours_start)
            if quiet_hours_start is not None
            else current.quiet_hours_start
        ),
        quiet_hours_end=(
            _validate_clock("quiet_hours_end", quiet_hours_end)
            if quiet_hours_end is not None
            else current.quiet_hours_end
        ),
        preferences=merged_preferences,
    )

    if updated.quiet_hours_enabled and not (
        updated.quiet_hours_start and updated.quiet_hours_end
    ):
        raise RequestValidationFailed(
            "Invalid quiet hours",
            details="quiet_hours_start and quiet_hours_end are required when quiet hours are enabled",
        )

    try:
        return repository.upsert(updated)
    except SQLAlchemyError as exc:
        session.rollback()
        raise UpstreamServiceError(
            "Failed to save user settings", details=str(exc)
        ) from exc


__all__ = ["get_user_settings", "update_user_settings", "valid_preference_keys"]
