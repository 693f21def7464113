"""Endpoints for sending notifications and reading the delivery log."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.application.use_cases.notifications import (
    count_notification_logs,
    dispatch_notification,
    list_notification_logs,
)
from app.infrastructure.database import get_db
from app.interfaces.api.schemas import (
    ChannelResultRead,
    NotificationLogCounts,
    NotificationLogList,
    NotificationLogRead,
    NotificationSendRequest,
    NotificationSendResponse,
)

router = APIRouter(prefix="/api/notifications", tags=["notifications"])


@router.post(
    "/send",
    response_model=NotificationSendResponse,
    response_model_exclude_none=True,
)
def send_notification(
    payload: NotificationSendRequest,
    db: Session = Depends(get_db),
) -> NotificationSendResponse:
    """Dispatch a templated notification on every requested channel."""

    results = dispatch_notification(
        db,
        user_id=payload.user_id,
        notification_type=payload.notification_type,
        variables=payload.variables,
        channels=payload.channels,
        metadata=payload.metadata,
    )
    return NotificationSendResponse(
        success=all(result.success for result in results),
        results=[ChannelResultRead(**result.to_payload()) for result in results],
    )


@router.get("/logs", response_model=NotificationLogList)
def list_logs(
    user_id: str = Query(...),
    channel: str | None = Query(None),
    limit: int = Query(50, ge=1),
    db: Session = Depends(get_db),
) -> NotificationLogList:
    logs = list_notification_logs(db, user_id=user_id, channel=channel, limit=limit)
    return NotificationLogList(
        data=[NotificationLogRead.model_validate(log) for log in logs]
    )


@router.get("/logs/counts", response_model=NotificationLogCounts)
def count_logs(
    user_id: str = Query(...),
    db: Session = Depends(get_db),
) -> NotificationLogCounts:
    counts = count_notification_logs(db, user_id=user_id)
    return NotificationLogCounts(user_id=user_id, **counts)


__all__ = ["router"]
