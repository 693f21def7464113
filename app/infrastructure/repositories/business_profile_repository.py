"""Persistence helpers for business profiles."""

from __future__ import annotations

from typing import Any

from sqlalchemy.orm import Session

from app.domain.entities import BusinessProfile
from app.infrastructure.models import BusinessProfileModel
from app.utils import ensure_app_naive_datetime, ensure_app_timezone, now_in_app_timezone


class BusinessProfileRepository:
    """Provide the business profile operations used by the API."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, business_id: str) -> BusinessProfile | None:
        model = self.session.get(BusinessProfileModel, business_id)
        return self._to_entity(model) if model else None

    def create(self, profile: BusinessProfile) -> BusinessProfile:
        model = BusinessProfileModel(
            id=profile.id,
            business_name=profile.business_name,
            contact_email=profile.contact_email,
            phone=profile.phone,
            business_hours=dict(profile.business_hours or {}),
            created_at=(
                ensure_app_naive_datetime(profile.created_at)
                or ensure_app_naive_datetime(now_in_app_timezone())
            ),
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update_hours(self, business_id: str, business_hours: dict[str, Any]) -> bool:
        """Replace the stored hours; return ``False`` when the business is unknown."""

        updated = (
            self.session.query(BusinessProfileModel)
            .filter(BusinessProfileModel.id == business_id)
            .update(
                {BusinessProfileModel.business_hours: business_hours},
                synchronize_session=False,
            )
        )
        self.session.commit()
        return bool(updated)

    @staticmethod
    def _to_entity(model: BusinessProfileModel) -> BusinessProfile:
        return BusinessProfile(
            id=model.id,
            business_name=model.business_name,
            contact_email=model.contact_email,
            phone=model.phone,
            business_hours=dict(model.business_hours or {}),
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["BusinessProfileRepository"]
