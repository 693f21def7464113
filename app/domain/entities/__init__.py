"""Domain entities exposed by the application."""

from .business import (
    BUSINESS_ENTITY_TYPES,
    DEFAULT_BUSINESS_ENTITY_TYPE,
    DEFAULT_TAX_CONTACT_NAME,
    DEFAULT_TAX_COUNTRY,
    DEFAULT_TAX_ID_TYPE,
    TAX_ID_TYPES,
    BusinessProfile,
    BusinessServiceCategory,
    BusinessTaxInfo,
)
from .channel_result import ChannelResult
from .contact import PROVIDER_ROLE_OWNER, CustomerProfile, Provider
from .notification_log import (
    NOTIFICATION_STATUS_FAILED,
    NOTIFICATION_STATUS_SENT,
    NOTIFICATION_STATUS_SKIPPED,
    SKIP_REASON_CHANNEL_DISABLED,
    SKIP_REASON_NO_RECIPIENT,
    SKIP_REASON_QUIET_HOURS,
    NotificationLog,
)
from .notification_template import NotificationTemplate
from .notification_type import (
    CHANNEL_EMAIL,
    CHANNEL_SMS,
    CHANNELS,
    NOTIFICATION_TYPES,
    ChannelRule,
    NotificationTypeRule,
    get_notification_type,
    is_quiet_hours_exempt,
)
from .user_settings import UserSettings

__all__ = [
    "BusinessProfile",
    "BusinessServiceCategory",
    "BusinessTaxInfo",
    "BUSINESS_ENTITY_TYPES",
    "DEFAULT_BUSINESS_ENTITY_TYPE",
    "DEFAULT_TAX_CONTACT_NAME",
    "DEFAULT_TAX_COUNTRY",
    "DEFAULT_TAX_ID_TYPE",
    "TAX_ID_TYPES",
    "ChannelResult",
    "CustomerProfile",
    "Provider",
    "PROVIDER_ROLE_OWNER",
    "NotificationLog",
    "NOTIFICATION_STATUS_FAILED",
    "NOTIFICATION_STATUS_SENT",
    "NOTIFICATION_STATUS_SKIPPED",
    "SKIP_REASON_CHANNEL_DISABLED",
    "SKIP_REASON_NO_RECIPIENT",
    "SKIP_REASON_QUIET_HOURS",
    "NotificationTemplate",
    "CHANNEL_EMAIL",
    "CHANNEL_SMS",
    "CHANNELS",
    "NOTIFICATION_TYPES",
    "ChannelRule",
    "NotificationTypeRule",
    "get_notification_type",
    "is_quiet_hours_exempt",
    "UserSettings",
]
