"""Endpoints for a user's notification settings."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.application.use_cases.user_settings import (
    get_user_settings,
    update_user_settings,
)
from app.infrastructure.database import get_db
from app.interfaces.api.schemas import (
    UserSettingsRead,
    UserSettingsResponse,
    UserSettingsUpdate,
)

router = APIRouter(prefix="/api/user-settings", tags=["user-settings"])


@router.get("/{user_id}", response_model=UserSettingsResponse)
def read_user_settings(user_id: str, db: Session = Depends(get_db)) -> UserSettingsResponse:
    settings = get_user_settings(db, user_id=user_id)
    return UserSettingsResponse(
        data=UserSettingsRead.model_validate(settings) if settings else None
    )


@router.put("/{user_id}", response_model=UserSettingsResponse)
def write_user_settings(
    user_id: str,
    payload: UserSettingsUpdate,
    db: Session = Depends(get_db),
) -> UserSettingsResponse:
    settings = update_user_settings(db, user_id=user_id, **payload.model_dump())
    return UserSettingsResponse(data=UserSettingsRead.model_validate(settings))


__all__ = ["router"]
