"""Deliver a templated notification to a user over email and SMS."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.config import get_settings
from app.domain.entities import (
    CHANNEL_EMAIL,
    CHANNEL_SMS,
    CHANNELS,
    NOTIFICATION_STATUS_FAILED,
    NOTIFICATION_STATUS_SENT,
    NOTIFICATION_STATUS_SKIPPED,
    NOTIFICATION_TYPES,
    SKIP_REASON_CHANNEL_DISABLED,
    SKIP_REASON_NO_RECIPIENT,
    SKIP_REASON_QUIET_HOURS,
    ChannelResult,
    NotificationLog,
    NotificationTemplate,
    NotificationTypeRule,
    UserSettings,
    get_notification_type,
    is_quiet_hours_exempt,
)
from app.domain.exceptions import (
    NotificationDispatchError,
    RequestValidationFailed,
    ServiceError,
    ServiceNotConfiguredError,
    TemplateIncompleteForChannelError,
    TemplateNotFoundError,
)
from app.infrastructure.email import send_email
from app.infrastructure.repositories import (
    ContactRepository,
    NotificationLogRepository,
    NotificationTemplateRepository,
    UserSettingsRepository,
)
from app.infrastructure.sms import send_sms
from app.utils import (
    ensure_app_timezone,
    is_time_in_window,
    now_in_app_timezone,
    parse_clock_time,
)

from .rendering import render_template

logger = logging.getLogger(__name__)


@dataclass
class _RenderedMessage:
    subject: str | None
    html: str | None
    text: str | None

    @property
    def log_body(self) -> str | None:
        return self.text or self.html


def normalize_channels(channels: Sequence[str] | None) -> list[str]:
    """Validate requested channels, defaulting to every known channel."""

    if not channels:
        return list(CHANNELS)
    normalized: list[str] = []
    for channel in channels:
        value = str(channel).strip().lower()
        if value not in CHANNELS:
            raise RequestValidationFailed(
                "Invalid channel",
                details=f"Unknown channel '{channel}'. Valid channels: {', '.join(CHANNELS)}",
            )
        if value not in normalized:
            normalized.append(value)
    return normalized


def resolve_notification_type(notification_type: str) -> NotificationTypeRule:
    rule = get_notification_type(notification_type)
    if rule is None:
        raise RequestValidationFailed(
            "Invalid notification type",
            details=list(NOTIFICATION_TYPES),
        )
    return rule


def is_quiet_hours(settings: UserSettings, now: datetime | None = None) -> bool:
    """Return ``True`` when ``now`` falls inside the user's quiet hours."""

    if not settings.quiet_hours_enabled:
        return False
    start = parse_clock_time(settings.quiet_hours_start)
    end = parse_clock_time(settings.quiet_hours_end)
    if start is None or end is None:
        return False
    local_now = ensure_app_timezone(now) if now is not None else now_in_app_timezone()
    return is_time_in_window(local_now.time(), start, end)


class _NotificationContext:
    """Lazily loaded data shared by every channel attempt of one dispatch."""

    _UNSET = object()

    def __init__(self, session: Session, user_id: str, notification_type: str) -> None:
        self._session = session
        self._user_id = user_id
        self._notification_type = notification_type
        self._template: Any = self._UNSET
        self._contacts: tuple[str | None, str | None] | None = None

    def template(self) -> NotificationTemplate:
        if self._template is self._UNSET:
            self._template = NotificationTemplateRepository(
                self._session
            ).get_active_by_key(self._notification_type)
        if self._template is None:
            raise TemplateNotFoundError(
                f"Template not found: {self._notification_type}"
            )
        return self._template

    def recipient(self, channel: str, settings: UserSettings) -> str | None:
        if channel == CHANNEL_EMAIL and settings.notification_email:
            override = settings.notification_email.strip()
            if override:
                return override
        if channel == CHANNEL_SMS and settings.notification_phone:
            override = settings.notification_phone.strip()
            if override:
                return override

        email, phone = self._profile_contacts()
        return email if channel == CHANNEL_EMAIL else phone

    def _profile_contacts(self) -> tuple[str | None, str | None]:
        if self._contacts is None:
            repository = ContactRepository(self._session)
            email: str | None = None
            phone: str | None = None
            customer = repository.get_customer_by_user_id(self._user_id)
            if customer is not None:
                email, phone = customer.email, customer.phone
            if not email or not phone:
                provider = repository.get_provider_by_user_id(self._user_id)
                if provider is not None:
                    email = email or provider.email
                    phone = phone or provider.phone
            self._contacts = (email or None, phone or None)
        return self._contacts


def _render_for_channel(
    template: NotificationTemplate, channel: str, variables: Mapping[str, Any]
) -> _RenderedMessage:
    if not template.supports_channel(channel):
        raise TemplateIncompleteForChannelError(
            f"Template '{template.template_key}' has no {channel} body"
        )
    if channel == CHANNEL_EMAIL:
        return _RenderedMessage(
            subject=render_template(template.email_subject, variables),
            html=render_template(template.email_body_html, variables) or None,
            text=render_template(template.email_body_text, variables) or None,
        )
    return _RenderedMessage(
        subject=None,
        html=None,
        text=render_template(template.sms_body, variables),
    )


def _deliver(channel: str, recipient: str, message: _RenderedMessage) -> str | None:
    if channel == CHANNEL_EMAIL:
        return send_email(
            message.subject or "",
            message.html,
            recipient,
            text_content=message.text,
        )
    return send_sms(message.text or "", recipient)


def _describe_error(exc: Exception) -> tuple[str, str]:
    if isinstance(exc, NotificationDispatchError):
        return str(exc), exc.code
    if isinstance(exc, ServiceError):
        text = f"{exc.message}: {exc.details}" if exc.details else exc.message
        code = (
            "ServiceNotConfigured"
            if isinstance(exc, ServiceNotConfiguredError)
            else "UpstreamServiceError"
        )
        return text, code
    return str(exc) or exc.__class__.__name__, "UnexpectedError"


def _attempt_channel(
    context: _NotificationContext,
    *,
    channel: str,
    rule: NotificationTypeRule,
    settings: UserSettings,
    quiet_hours_active: bool,
    variables: Mapping[str, Any],
    base_log: NotificationLog,
) -> tuple[ChannelResult, NotificationLog]:
    log = NotificationLog(**{**base_log.__dict__, "channel": channel})

    if not settings.channel_enabled(channel, rule):
        log.status = NOTIFICATION_STATUS_SKIPPED
        log.skip_reason = SKIP_REASON_CHANNEL_DISABLED
        return (
            ChannelResult(
                success=True,
                channel=channel,
                skipped=True,
                skip_reason=SKIP_REASON_CHANNEL_DISABLED,
            ),
            log,
        )

    if quiet_hours_active:
        log.status = NOTIFICATION_STATUS_SKIPPED
        log.skip_reason = SKIP_REASON_QUIET_HOURS
        return (
            ChannelResult(
                success=True,
                channel=channel,
                skipped=True,
                skip_reason=SKIP_REASON_QUIET_HOURS,
            ),
            log,
        )

    recipient: str | None = None
    try:
        message = _render_for_channel(context.template(), channel, variables)
        log.subject = message.subject
        log.body = message.log_body

        recipient = context.recipient(channel, settings)
        if channel == CHANNEL_EMAIL:
            log.recipient_email = recipient
        else:
            log.recipient_phone = recipient
        if not recipient:
            log.status = NOTIFICATION_STATUS_SKIPPED
            log.skip_reason = SKIP_REASON_NO_RECIPIENT
            return (
                ChannelResult(
                    success=True,
                    channel=channel,
                    skipped=True,
                    skip_reason=SKIP_REASON_NO_RECIPIENT,
                ),
                log,
            )

        external_id = _deliver(channel, recipient, message)
    except Exception as exc:
        error, code = _describe_error(exc)
        if isinstance(exc, ServiceError):
            logger.warning(
                "%s notification %s failed for user %s: %s",
                channel,
                log.notification_type,
                log.user_id,
                error,
            )
        else:
            logger.exception(
                "Unexpected error delivering %s notification %s to user %s",
                channel,
                log.notification_type,
                log.user_id,
            )
        log.status = NOTIFICATION_STATUS_FAILED
        log.error_message = error
        return (
            ChannelResult(
                success=False,
                channel=channel,
                recipient=recipient,
                error=error,
                error_code=code,
            ),
            log,
        )

    log.status = NOTIFICATION_STATUS_SENT
    log.external_id = external_id
    log.sent_at = now_in_app_timezone()
    logger.info(
        "%s notification %s sent to user %s", channel, log.notification_type, log.user_id
    )
    return (
        ChannelResult(
            success=True,
            channel=channel,
            recipient=recipient,
            external_id=external_id,
        ),
        log,
    )


def _record_attempt(session: Session, log: NotificationLog) -> None:
    try:
        NotificationLogRepository(session).create(log)
    except SQLAlchemyError:
        session.rollback()
        logger.exception(
            "Failed to record %s notification log for user %s", log.channel, log.user_id
        )


def dispatch_notification(
    session: Session,
    *,
    user_id: str,
    notification_type: str,
    variables: Mapping[str, Any] | None = None,
    channels: Sequence[str] | None = None,
    metadata: dict[str, Any] | None = None,
    now: datetime | None = None,
) -> list[ChannelResult]:
    """Send ``notification_type`` to ``user_id`` on each requested channel.

    Channels are attempted independently: a failure on one never prevents the
    other from being tried, and every attempt (sent, failed or skipped) is
    written to the notification log exactly once.
    """

    if not user_id:
        raise RequestValidationFailed("userId is required")
    rule = resolve_notification_type(notification_type)
    requested = normalize_channels(channels)
    bindings = dict(variables or {})

    settings = UserSettingsRepository(session).get_by_user_id(user_id)
    if settings is None:
        settings = UserSettings.defaults_for(user_id)

    exempt = is_quiet_hours_exempt(
        rule.key, overrides=get_settings().exempt_notification_types()
    )
    quiet_hours_active = not exempt and is_quiet_hours(settings, now)

    context = _NotificationContext(session, user_id, rule.key)
    base_log = NotificationLog(
        id=None,
        user_id=user_id,
        notification_type=rule.key,
        channel="",
        status=NOTIFICATION_STATUS_FAILED,
        metadata=dict(metadata or {}),
    )

    logger.info(
        "Dispatching %s to user %s via %s", rule.key, user_id, ", ".join(requested)
    )
    results: list[ChannelResult] = []
    for channel in requested:
        result, log = _attempt_channel(
            context,
            channel=channel,
            rule=rule,
            settings=settings,
            quiet_hours_active=quiet_hours_active,
            variables=bindings,
            base_log=base_log,
        )
        _record_attempt(session, log)
        results.append(result)
    return results


__all__ = [
    "dispatch_notification",
    "is_quiet_hours",
    "normalize_channels",
    "resolve_notification_type",
]
