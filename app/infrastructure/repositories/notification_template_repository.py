"""Persistence helpers for notification templates."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import true
from sqlalchemy.orm import Session

from app.domain.entities import NotificationTemplate
from app.infrastructure.models import NotificationTemplateModel
from app.utils import ensure_app_timezone


class NotificationTemplateRepository:
    """Read and register notification templates."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self, *, include_inactive: bool = False) -> Sequence[NotificationTemplate]:
        query = self.session.query(NotificationTemplateModel)
        if not include_inactive:
            query = query.filter(NotificationTemplateModel.is_active == true())
        query = query.order_by(NotificationTemplateModel.template_key)
        return [self._to_entity(model) for model in query.all()]

    def get_active_by_key(self, template_key: str) -> NotificationTemplate | None:
        model = (
            self.session.query(NotificationTemplateModel)
            .filter(NotificationTemplateModel.template_key == template_key)
            .filter(NotificationTemplateModel.is_active == true())
            .one_or_none()
        )
        return self._to_entity(model) if model else None

    def get_by_key(self, template_key: str) -> NotificationTemplate | None:
        model = (
            self.session.query(NotificationTemplateModel)
            .filter(NotificationTemplateModel.template_key == template_key)
            .one_or_none()
        )
        return self._to_entity(model) if model else None

    def save(self, template: NotificationTemplate) -> NotificationTemplate:
        """Create the template, or replace the content stored under its key."""

        model = (
            self.session.query(NotificationTemplateModel)
            .filter(NotificationTemplateModel.template_key == template.template_key)
            .one_or_none()
        )
        if model is None:
            model = NotificationTemplateModel(template_key=template.template_key)
        self._apply_entity_to_model(model, template)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _apply_entity_to_model(
        model: NotificationTemplateModel, template: NotificationTemplate
    ) -> None:
        model.template_name = template.template_name
        model.description = template.description
        model.email_subject = template.email_subject
        model.email_body_html = template.email_body_html
        model.email_body_text = template.email_body_text
        model.sms_body = template.sms_body
        model.variables = list(template.variables or [])
        model.is_active = template.is_active

    @staticmethod
    def _to_entity(model: NotificationTemplateModel) -> NotificationTemplate:
        return NotificationTemplate(
            id=model.id,
            template_key=model.template_key,
            template_name=model.template_name,
            description=model.description,
            email_subject=model.email_subject,
            email_body_html=model.email_body_html,
            email_body_text=model.email_body_text,
            sms_body=model.sms_body,
            variables=list(model.variables or []),
            is_active=bool(model.is_active),
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )


__all__ = ["NotificationTemplateRepository"]
