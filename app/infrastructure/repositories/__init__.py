"""Repository implementations for infrastructure layer."""

from .business_profile_repository import BusinessProfileRepository
from .business_service_category_repository import BusinessServiceCategoryRepository
from .business_tax_info_repository import BusinessTaxInfoRepository
from .contact_repository import ContactRepository
from .notification_log_repository import NotificationLogRepository
from .notification_template_repository import NotificationTemplateRepository
from .user_settings_repository import UserSettingsRepository

__all__ = [
    "BusinessProfileRepository",
    "BusinessServiceCategoryRepository",
    "BusinessTaxInfoRepository",
    "ContactRepository",
    "NotificationLogRepository",
    "NotificationTemplateRepository",
    "UserSettingsRepository",
]
