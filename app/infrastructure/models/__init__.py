"""ORM models used by the application infrastructure."""

from .business import (
    BusinessProfileModel,
    BusinessServiceCategoryModel,
    BusinessTaxInfoModel,
)
from .contact import CustomerProfileModel, ProviderModel
from .notification_log import NotificationLogModel
from .notification_template import NotificationTemplateModel
from .user_settings import UserSettingsModel

__all__ = [
    "BusinessProfileModel",
    "BusinessServiceCategoryModel",
    "BusinessTaxInfoModel",
    "CustomerProfileModel",
    "ProviderModel",
    "NotificationLogModel",
    "NotificationTemplateModel",
    "UserSettingsModel",
]
