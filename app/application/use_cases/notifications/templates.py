"""Use cases for reading and registering notification templates."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import NotificationTemplate, get_notification_type
from app.domain.exceptions import RequestValidationFailed
from app.infrastructure.repositories import NotificationTemplateRepository

from .rendering import referenced_variables


def list_notification_templates(
    session: Session, *, include_inactive: bool = False
) -> Sequence[NotificationTemplate]:
    return NotificationTemplateRepository(session).list(
        include_inactive=include_inactive
    )


def register_notification_template(
    session: Session, template: NotificationTemplate
) -> NotificationTemplate:
    """Validate ``template`` and store it under its key.

    The key must name a catalog notification type, at least one channel body
    must be present and every placeholder used by the bodies must be declared
    in ``variables``.
    """

    if get_notification_type(template.template_key) is None:
        raise RequestValidationFailed(
            "Invalid notification type", details=template.template_key
        )
    if not template.is_usable():
        raise RequestValidationFailed(
            "Template must define an email or SMS body",
            details=template.template_key,
        )

    used: list[str] = []
    for text in (
        template.email_subject,
        template.email_body_html,
        template.email_body_text,
        template.sms_body,
    ):
        for name in referenced_variables(text):
            if name not in used:
                used.append(name)
    undeclared = [name for name in used if name not in template.variables]
    if undeclared:
        raise RequestValidationFailed(
            "Template uses undeclared variables", details=", ".join(undeclared)
        )

    return NotificationTemplateRepository(session).save(template)


__all__ = ["list_notification_templates", "register_notification_template"]
