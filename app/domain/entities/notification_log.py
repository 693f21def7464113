"""Domain entity recording a single notification delivery attempt."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

NOTIFICATION_STATUS_SENT = "sent"
NOTIFICATION_STATUS_FAILED = "failed"
NOTIFICATION_STATUS_SKIPPED = "skipped"

SKIP_REASON_CHANNEL_DISABLED = "channel_disabled"
SKIP_REASON_QUIET_HOURS = "quiet_hours"
SKIP_REASON_NO_RECIPIENT = "no_recipient"


@dataclass
class NotificationLog:
    """Audit record of one channel attempt. Never updated once stored."""

    id: int | None
    user_id: str
    notification_type: str
    channel: str
    status: str
    recipient_email: str | None = None
    recipient_phone: str | None = None
    external_id: str | None = None
    subject: str | None = None
    body: str | None = None
    error_message: str | None = None
    skip_reason: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)
    created_at: datetime | None = None
    sent_at: datetime | None = None


__all__ = [
    "NotificationLog",
    "NOTIFICATION_STATUS_SENT",
    "NOTIFICATION_STATUS_FAILED",
    "NOTIFICATION_STATUS_SKIPPED",
    "SKIP_REASON_CHANNEL_DISABLED",
    "SKIP_REASON_QUIET_HOURS",
    "SKIP_REASON_NO_RECIPIENT",
]
