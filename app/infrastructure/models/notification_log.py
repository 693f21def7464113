"""SQLAlchemy model for the notification delivery audit trail."""

from sqlalchemy import Column, DateTime, Index, Integer, String, Text

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime

from ._types import json_type


class NotificationLogModel(Base):
    """Database representation of one notification channel attempt."""

    __tablename__ = "notification_logs"
    __table_args__ = (
        Index("idx_notification_logs_user_status", "user_id", "status"),
        Index("idx_notification_logs_type_status", "notification_type", "status"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String(36), nullable=False, index=True)
    notification_type = Column(String(100), nullable=False)
    channel = Column(String(16), nullable=False, index=True)
    status = Column(String(16), nullable=False)
    recipient_email = Column(String(255), nullable=True)
    recipient_phone = Column(String(32), nullable=True)
    external_id = Column(String(255), nullable=True)
    subject = Column(String(255), nullable=True)
    body = Column(Text, nullable=True)
    error_message = Column(Text, nullable=True)
    skip_reason = Column(String(50), nullable=True)
    metadata_ = Column("metadata", json_type, nullable=False, default=dict)
    created_at = Column(
        DateTime(), nullable=False, default=now_in_app_naive_datetime, index=True
    )
    sent_at = Column(DateTime(), nullable=True)


__all__ = ["NotificationLogModel"]
