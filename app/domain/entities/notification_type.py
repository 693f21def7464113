"""Catalog of notification types and the channel rules attached to them."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

CHANNEL_EMAIL = "email"
CHANNEL_SMS = "sms"
CHANNELS: tuple[str, ...] = (CHANNEL_EMAIL, CHANNEL_SMS)


@dataclass(frozen=True)
class ChannelRule:
    """How a notification type behaves on a single channel."""

    preference_key: str
    default_enabled: bool


@dataclass(frozen=True)
class NotificationTypeRule:
    """Explicit channel configuration for one notification type.

    ``transactional`` types are required sends and are delivered even while the
    recipient's quiet hours are active.
    """

    key: str
    description: str
    email: ChannelRule
    sms: ChannelRule
    transactional: bool = False

    def channel_rule(self, channel: str) -> ChannelRule:
        if channel == CHANNEL_EMAIL:
            return self.email
        if channel == CHANNEL_SMS:
            return self.sms
        raise ValueError(f"Unknown channel: {channel}")


def _rule(
    key: str,
    description: str,
    *,
    sms_default: bool = False,
    transactional: bool = False,
) -> NotificationTypeRule:
    return NotificationTypeRule(
        key=key,
        description=description,
        email=ChannelRule(preference_key=f"{key}_email", default_enabled=True),
        sms=ChannelRule(preference_key=f"{key}_sms", default_enabled=sms_default),
        transactional=transactional,
    )


NOTIFICATION_TYPES: Mapping[str, NotificationTypeRule] = MappingProxyType(
    {
        rule.key: rule
        for rule in (
            _rule(
                "customer_welcome",
                "Sent when a new customer creates an account",
            ),
            _rule(
                "customer_booking_accepted",
                "Sent to the customer when a provider accepts a booking",
                transactional=True,
            ),
            _rule(
                "customer_booking_completed",
                "Sent to the customer when a booking is completed",
            ),
            _rule(
                "customer_booking_reminder",
                "Reminder sent to the customer the day before a booking",
            ),
            _rule(
                "customer_booking_no_show",
                "Sent to the customer when a booking is marked as a no-show",
            ),
            _rule(
                "provider_new_booking",
                "Sent to providers when a new booking is created",
                transactional=True,
            ),
            _rule(
                "provider_booking_cancelled",
                "Sent to providers when a customer cancels a booking",
                transactional=True,
            ),
            _rule(
                "provider_booking_rescheduled",
                "Sent to providers when a customer reschedules a booking",
                transactional=True,
            ),
            _rule(
                "business_new_booking",
                "Sent to the business owner when a new booking is created",
            ),
            _rule(
                "admin_business_verification",
                "Sent to administrators when a business requests verification",
            ),
        )
    }
)


def get_notification_type(key: str) -> NotificationTypeRule | None:
    """Return the catalog entry for ``key`` if it exists."""

    return NOTIFICATION_TYPES.get(key)


def is_quiet_hours_exempt(
    key: str, *, overrides: frozenset[str] | None = None
) -> bool:
    """Return ``True`` when ``key`` must be delivered during quiet hours.

    ``overrides`` replaces the catalog flags entirely when provided.
    """

    if overrides is not None:
        return key in overrides
    rule = NOTIFICATION_TYPES.get(key)
    return bool(rule and rule.transactional)


__all__ = [
    "CHANNEL_EMAIL",
    "CHANNEL_SMS",
    "CHANNELS",
    "ChannelRule",
    "NotificationTypeRule",
    "NOTIFICATION_TYPES",
    "get_notification_type",
    "is_quiet_hours_exempt",
]
