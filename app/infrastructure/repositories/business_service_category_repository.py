"""Persistence helpers for the categories offered by a business."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import BusinessServiceCategory
from app.infrastructure.models import BusinessServiceCategoryModel
from app.utils import ensure_app_naive_datetime, ensure_app_timezone, now_in_app_timezone


class BusinessServiceCategoryRepository:
    """Provide CRUD operations for business service categories."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_business(self, business_id: str) -> Sequence[BusinessServiceCategory]:
        query = (
            self.session.query(BusinessServiceCategoryModel)
            .filter(BusinessServiceCategoryModel.business_id == business_id)
            .order_by(BusinessServiceCategoryModel.id)
        )
        return [self._to_entity(model) for model in query.all()]

    def create(self, category: BusinessServiceCategory) -> BusinessServiceCategory:
        model = BusinessServiceCategoryModel(
            business_id=category.business_id,
            category_id=category.category_id,
            is_active=category.is_active,
            created_at=(
                ensure_app_naive_datetime(category.created_at)
                or ensure_app_naive_datetime(now_in_app_timezone())
            ),
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, business_id: str, category_id: str) -> int:
        deleted = (
            self.session.query(BusinessServiceCategoryModel)
            .filter(BusinessServiceCategoryModel.business_id == business_id)
            .filter(BusinessServiceCategoryModel.category_id == category_id)
            .delete(synchronize_session=False)
        )
        self.session.commit()
        return int(deleted)

    def delete_all_for_business(self, business_id: str) -> int:
        deleted = (
            self.session.query(BusinessServiceCategoryModel)
            .filter(BusinessServiceCategoryModel.business_id == business_id)
            .delete(synchronize_session=False)
        )
        self.session.commit()
        return int(deleted)

    @staticmethod
    def _to_entity(model: BusinessServiceCategoryModel) -> BusinessServiceCategory:
        return BusinessServiceCategory(
            id=model.id,
            business_id=model.business_id,
            category_id=model.category_id,
            is_active=bool(model.is_active),
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["BusinessServiceCategoryRepository"]
