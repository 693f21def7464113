from .business import (
    BusinessHoursResponse,
    BusinessHoursUpdate,
    BusinessHoursUpdateResponse,
    MessageResponse,
    ServiceCategoryCreate,
    ServiceCategoryCreated,
    ServiceCategoryDelete,
    ServiceCategoryList,
    ServiceCategoryRead,
    TaxInfoRead,
    TaxInfoResponse,
    TaxInfoSaveResponse,
    TaxInfoUpdate,
)
from .diagnostics import DiagnosticRead, HealthRead
from .notification import (
    ChannelResultRead,
    NotificationLogCounts,
    NotificationLogList,
    NotificationLogRead,
    NotificationSendRequest,
    NotificationSendResponse,
)
from .upload import ImageUploadRequest, ImageUploadResponse
from .user_settings import UserSettingsRead, UserSettingsResponse, UserSettingsUpdate

__all__ = [
    "BusinessHoursResponse",
    "BusinessHoursUpdate",
    "BusinessHoursUpdateResponse",
    "ChannelResultRead",
    "DiagnosticRead",
    "HealthRead",
    "ImageUploadRequest",
    "ImageUploadResponse",
    "MessageResponse",
    "NotificationLogCounts",
    "NotificationLogList",
    "NotificationLogRead",
    "NotificationSendRequest",
    "NotificationSendResponse",
    "ServiceCategoryCreate",
    "ServiceCategoryCreated",
    "ServiceCategoryDelete",
    "ServiceCategoryList",
    "ServiceCategoryRead",
    "TaxInfoRead",
    "TaxInfoResponse",
    "TaxInfoSaveResponse",
    "TaxInfoUpdate",
    "UserSettingsRead",
    "UserSettingsResponse",
    "UserSettingsUpdate",
]
