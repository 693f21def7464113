"""Persistence helpers for the notification delivery log."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.domain.entities import (
    NOTIFICATION_STATUS_FAILED,
    NOTIFICATION_STATUS_SENT,
    NOTIFICATION_STATUS_SKIPPED,
    NotificationLog,
)
from app.infrastructure.models import NotificationLogModel
from app.utils import ensure_app_naive_datetime, ensure_app_timezone, now_in_app_timezone


class NotificationLogRepository:
    """Append and read notification log rows. Rows are never updated or deleted."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, log: NotificationLog) -> NotificationLog:
        model = NotificationLogModel(
            user_id=log.user_id,
            notification_type=log.notification_type,
            channel=log.channel,
            status=log.status,
            recipient_email=log.recipient_email,
            recipient_phone=log.recipient_phone,
            external_id=log.external_id,
            subject=log.subject,
            body=log.body,
            error_message=log.error_message,
            skip_reason=log.skip_reason,
            metadata_=dict(log.metadata or {}),
            created_at=(
                ensure_app_naive_datetime(log.created_at)
                or ensure_app_naive_datetime(now_in_app_timezone())
            ),
            sent_at=ensure_app_naive_datetime(log.sent_at),
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def list_for_user(
        self,
        user_id: str,
        *,
        channel: str | None = None,
        limit: int | None = 50,
    ) -> Sequence[NotificationLog]:
        query = self.session.query(NotificationLogModel).filter(
            NotificationLogModel.user_id == user_id
        )
        if channel is not None:
            query = query.filter(NotificationLogModel.channel == channel)
        query = query.order_by(
            NotificationLogModel.created_at.desc(), NotificationLogModel.id.desc()
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def count_by_status(self, user_id: str) -> dict[str, int]:
        counts = {
            NOTIFICATION_STATUS_SENT: 0,
            NOTIFICATION_STATUS_FAILED: 0,
            NOTIFICATION_STATUS_SKIPPED: 0,
        }
        rows = (
            self.session.query(NotificationLogModel.status, func.count(NotificationLogModel.id))
            .filter(NotificationLogModel.user_id == user_id)
            .group_by(NotificationLogModel.status)
            .all()
        )
        for status, total in rows:
            counts[status] = int(total)
        return counts

    @staticmethod
    def _to_entity(model: NotificationLogModel) -> NotificationLog:
        return NotificationLog(
            id=model.id,
            user_id=model.user_id,
            notification_type=model.notification_type,
            channel=model.channel,
            status=model.status,
            recipient_email=model.recipient_email,
            recipient_phone=model.recipient_phone,
            external_id=model.external_id,
            subject=model.subject,
            body=model.body,
            error_message=model.error_message,
            skip_reason=model.skip_reason,
            metadata=dict(model.metadata_ or {}),
            created_at=ensure_app_timezone(model.created_at),
            sent_at=ensure_app_timezone(model.sent_at),
        )


__all__ = ["NotificationLogRepository"]
