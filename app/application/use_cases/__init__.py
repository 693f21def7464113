"""Aggregate application use cases."""

from .business import (
    add_service_category,
    delete_service_categories,
    get_business_hours,
    get_tax_info,
    list_service_categories,
    save_tax_info,
    update_business_hours,
)
from .diagnostics import diagnostic_report, health_status
from .notifications import (
    count_notification_logs,
    dispatch_notification,
    list_notification_logs,
)
from .uploads import upload_onboarding_image
from .user_settings import get_user_settings, update_user_settings

__all__ = [
    "add_service_category",
    "count_notification_logs",
    "delete_service_categories",
    "diagnostic_report",
    "dispatch_notification",
    "get_business_hours",
    "get_tax_info",
    "get_user_settings",
    "health_status",
    "list_notification_logs",
    "list_service_categories",
    "save_tax_info",
    "update_business_hours",
    "update_user_settings",
    "upload_onboarding_image",
]
