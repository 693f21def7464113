"""Read access to the notification delivery log."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain.entities import CHANNELS, NotificationLog
from app.domain.exceptions import RequestValidationFailed, UpstreamServiceError
from app.infrastructure.repositories import NotificationLogRepository

MAX_LOG_PAGE_SIZE = 200


def list_notification_logs(
    session: Session,
    *,
    user_id: str,
    channel: str | None = None,
    limit: int = 50,
) -> Sequence[NotificationLog]:
    """Return the newest log rows for ``user_id``."""

    if not user_id:
        raise RequestValidationFailed("Missing required fields", details="user_id")
    if channel is not None and channel not in CHANNELS:
        raise RequestValidationFailed(
            "Invalid channel", details=f"Valid channels: {', '.join(CHANNELS)}"
        )
    limit = max(1, min(limit, MAX_LOG_PAGE_SIZE))
    try:
        return NotificationLogRepository(session).list_for_user(
            user_id, channel=channel, limit=limit
        )
    except SQLAlchemyError as exc:
        raise UpstreamServiceError(
            "Failed to fetch notification logs", details=str(exc)
        ) from exc


def count_notification_logs(session: Session, *, user_id: str) -> dict[str, int]:
    """Return the number of sent, failed and skipped attempts for ``user_id``."""

    if not user_id:
        raise RequestValidationFailed("Missing required fields", details="user_id")
    try:
        return NotificationLogRepository(session).count_by_status(user_id)
    except SQLAlchemyError as exc:
        raise UpstreamServiceError(
            "Failed to count notification logs", details=str(exc)
        ) from exc


__all__ = ["count_notification_logs", "list_notification_logs", "MAX_LOG_PAGE_SIZE"]
