"""Schemas for user notification settings."""

from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class UserSettingsUpdate(BaseModel):
    """Partial update; omitted fields keep their stored value."""

    email_notifications: bool | None = Field(
        None, validation_alias=AliasChoices("email_notifications", "emailNotifications")
    )
    sms_notifications: bool | None = Field(
        None, validation_alias=AliasChoices("sms_notifications", "smsNotifications")
    )
    notification_email: str | None = Field(
        None, validation_alias=AliasChoices("notification_email", "notificationEmail")
    )
    notification_phone: str | None = Field(
        None, validation_alias=AliasChoices("notification_phone", "notificationPhone")
    )
    quiet_hours_enabled: bool | None = Field(
        None, validation_alias=AliasChoices("quiet_hours_enabled", "quietHoursEnabled")
    )
    quiet_hours_start: str | None = Field(
        None, validation_alias=AliasChoices("quiet_hours_start", "quietHoursStart")
    )
    quiet_hours_end: str | None = Field(
        None, validation_alias=AliasChoices("quiet_hours_end", "quietHoursEnd")
    )
    preferences: dict[str, bool] | None = None


class UserSettingsRead(BaseModel):
    id: int | None
    user_id: str
    email_notifications: bool
    sms_notifications: bool
    notification_email: str | None
    notification_phone: str | None
    quiet_hours_enabled: bool
    quiet_hours_start: str | None
    quiet_hours_end: str | None
    preferences: dict[str, bool]
    created_at: datetime | None
    updated_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class UserSettingsResponse(BaseModel):
    data: UserSettingsRead | None
