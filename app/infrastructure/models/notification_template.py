"""SQLAlchemy model for notification content templates."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime

from ._types import json_type


class NotificationTemplateModel(Base):
    """Database representation of a notification template."""

    __tablename__ = "notification_templates"

    id = Column(Integer, primary_key=True, index=True)
    template_key = Column(String(100), nullable=False, unique=True, index=True)
    template_name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    email_subject = Column(String(255), nullable=True)
    email_body_html = Column(Text, nullable=True)
    email_body_text = Column(Text, nullable=True)
    sms_body = Column(Text, nullable=True)
    variables = Column(json_type, nullable=False, default=list)
    is_active = Column(Boolean, nullable=False, default=True, index=True)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(DateTime(), nullable=True, onupdate=now_in_app_naive_datetime)


__all__ = ["NotificationTemplateModel"]
