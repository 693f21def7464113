"""Domain entity representing a notification content template."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from .notification_type import CHANNEL_EMAIL, CHANNEL_SMS


@dataclass
class NotificationTemplate:
    """Email and SMS content shared by every notification of one type."""

    id: int | None
    template_key: str
    template_name: str
    description: str | None = None
    email_subject: str | None = None
    email_body_html: str | None = None
    email_body_text: str | None = None
    sms_body: str | None = None
    variables: list[str] = field(default_factory=list)
    is_active: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def has_email_body(self) -> bool:
        return bool(self.email_body_html or self.email_body_text)

    def has_sms_body(self) -> bool:
        return bool(self.sms_body)

    def supports_channel(self, channel: str) -> bool:
        """Return ``True`` when the template carries a body for ``channel``."""

        if channel == CHANNEL_EMAIL:
            return self.has_email_body()
        if channel == CHANNEL_SMS:
            return self.has_sms_body()
        return False

    def is_usable(self) -> bool:
        """A template must provide at least one channel body."""

        return self.has_email_body() or self.has_sms_body()


__all__ = ["NotificationTemplate"]
