"""Schemas for notification dispatch and delivery log endpoints."""

from datetime import datetime
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class NotificationSendRequest(BaseModel):
    """Payload accepted by ``POST /api/notifications/send``."""

    user_id: str = Field(
        ..., min_length=1, validation_alias=AliasChoices("userId", "user_id")
    )
    notification_type: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices(
            "notificationType", "templateKey", "notification_type", "template_key"
        ),
    )
    variables: dict[str, Any] = Field(
        default_factory=dict,
        validation_alias=AliasChoices("templateVariables", "variables"),
    )
    channels: list[str] | None = None
    metadata: dict[str, Any] | None = None


class ChannelResultRead(BaseModel):
    success: bool
    channel: str
    recipient: str | None = None
    externalId: str | None = None
    error: str | None = None
    errorCode: str | None = None
    skipped: bool | None = None
    skipReason: str | None = None


class NotificationSendResponse(BaseModel):
    success: bool
    results: list[ChannelResultRead]


class NotificationLogRead(BaseModel):
    id: int
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
    metadata: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime | None = None
    sent_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class NotificationLogList(BaseModel):
    data: list[NotificationLogRead]


class NotificationLogCounts(BaseModel):
    user_id: str
    sent: int
    failed: int
    skipped: int
