"""Persistence helpers for user notification settings."""

from __future__ import annotations

from sqlalchemy.orm import Session

from app.domain.entities import UserSettings
from app.infrastructure.models import UserSettingsModel
from app.utils import ensure_app_naive_datetime, ensure_app_timezone, now_in_app_timezone

from .upsert import upsert_row


class UserSettingsRepository:
    """Read and upsert :class:`UserSettings` rows keyed by user id."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_by_user_id(self, user_id: str) -> UserSettings | None:
        model = (
            self.session.query(UserSettingsModel)
            .filter(UserSettingsModel.user_id == user_id)
            .one_or_none()
        )
        return self._to_entity(model) if model else None

    def upsert(self, settings: UserSettings) -> UserSettings:
        now = ensure_app_naive_datetime(now_in_app_timezone())
        values = {
            "user_id": settings.user_id,
            "email_notifications": settings.email_notifications,
            "sms_notifications": settings.sms_notifications,
            "notification_email": settings.notification_email,
            "notification_phone": settings.notification_phone,
            "quiet_hours_enabled": settings.quiet_hours_enabled,
            "quiet_hours_start": settings.quiet_hours_start,
            "quiet_hours_end": settings.quiet_hours_end,
            "preferences": dict(settings.preferences or {}),
            "created_at": now,
            "updated_at": now,
        }
        model = upsert_row(
            self.session, UserSettingsModel, values, conflict_column="user_id"
        )
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: UserSettingsModel) -> UserSettings:
        return UserSettings(
            id=model.id,
            user_id=model.user_id,
            email_notifications=bool(model.email_notifications),
            sms_notifications=bool(model.sms_notifications),
            notification_email=model.notification_email,
            notification_phone=model.notification_phone,
            quiet_hours_enabled=bool(model.quiet_hours_enabled),
            quiet_hours_start=model.quiet_hours_start,
            quiet_hours_end=model.quiet_hours_end,
            preferences=dict(model.preferences or {}),
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )


__all__ = ["UserSettingsRepository"]
