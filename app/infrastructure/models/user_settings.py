"""SQLAlchemy model for per-user notification settings."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime

from ._types import json_type


class UserSettingsModel(Base):
    """Database representation of a user's notification preferences."""

    __tablename__ = "user_settings"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String(36), nullable=False, unique=True, index=True)
    email_notifications = Column(Boolean, nullable=False, default=True)
    sms_notifications = Column(Boolean, nullable=False, default=False)
    notification_email = Column(String(255), nullable=True)
    notification_phone = Column(String(32), nullable=True)
    quiet_hours_enabled = Column(Boolean, nullable=False, default=False)
    quiet_hours_start = Column(String(8), nullable=True)
    quiet_hours_end = Column(String(8), nullable=True)
    preferences = Column(json_type, nullable=False, default=dict)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(DateTime(), nullable=True, onupdate=now_in_app_naive_datetime)


__all__ = ["UserSettingsModel"]
