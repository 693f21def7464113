"""Domain entity holding a user's notification preferences."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from .notification_type import CHANNEL_EMAIL, CHANNEL_SMS, NotificationTypeRule


@dataclass
class UserSettings:
    """Per-user notification toggles, contact overrides and quiet hours."""

    user_id: str
    id: int | None = None
    email_notifications: bool = True
    sms_notifications: bool = False
    notification_email: str | None = None
    notification_phone: str | None = None
    quiet_hours_enabled: bool = False
    quiet_hours_start: str | None = None
    quiet_hours_end: str | None = None
    preferences: dict[str, bool] = field(default_factory=dict)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def defaults_for(cls, user_id: str) -> "UserSettings":
        """Settings assumed for users without a stored row."""

        return cls(user_id=user_id)

    def channel_enabled(self, channel: str, rule: NotificationTypeRule) -> bool:
        """Return ``True`` when ``channel`` is allowed for ``rule``.

        Both the global toggle and the per-type toggle must be on; the per-type
        toggle falls back to the catalog default when the user never set it.
        """

        if channel == CHANNEL_EMAIL:
            master = self.email_notifications
        elif channel == CHANNEL_SMS:
            master = self.sms_notifications
        else:
            return False
        if not master:
            return False

        channel_rule = rule.channel_rule(channel)
        value = self.preferences.get(channel_rule.preference_key)
        if value is None:
            return channel_rule.default_enabled
        return bool(value)


__all__ = ["UserSettings"]
