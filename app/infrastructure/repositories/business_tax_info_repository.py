"""Persistence helpers for business tax information."""

from __future__ import annotations

from sqlalchemy.orm import Session

from app.domain.entities import BusinessTaxInfo
from app.infrastructure.models import BusinessTaxInfoModel
from app.utils import ensure_app_naive_datetime, ensure_app_timezone, now_in_app_timezone

from .upsert import upsert_row


class BusinessTaxInfoRepository:
    """Read and upsert the single tax record stored per business."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_by_business_id(self, business_id: str) -> BusinessTaxInfo | None:
        model = (
            self.session.query(BusinessTaxInfoModel)
            .filter(BusinessTaxInfoModel.business_id == business_id)
            .one_or_none()
        )
        return self._to_entity(model) if model else None

    def count_for_business(self, business_id: str) -> int:
        return (
            self.session.query(BusinessTaxInfoModel)
            .filter(BusinessTaxInfoModel.business_id == business_id)
            .count()
        )

    def upsert(self, tax_info: BusinessTaxInfo) -> BusinessTaxInfo:
        now = ensure_app_naive_datetime(now_in_app_timezone())
        values = {
            "business_id": tax_info.business_id,
            "business_entity_type": tax_info.business_entity_type,
            "legal_business_name": tax_info.legal_business_name,
            "tax_id": tax_info.tax_id,
            "tax_id_type": tax_info.tax_id_type,
            "tax_address_line1": tax_info.tax_address_line1,
            "tax_address_line2": tax_info.tax_address_line2,
            "tax_city": tax_info.tax_city,
            "tax_state": tax_info.tax_state,
            "tax_postal_code": tax_info.tax_postal_code,
            "tax_country": tax_info.tax_country,
            "tax_contact_name": tax_info.tax_contact_name,
            "tax_contact_email": tax_info.tax_contact_email,
            "tax_contact_phone": tax_info.tax_contact_phone,
            "created_at": now,
            "updated_at": now,
        }
        model = upsert_row(
            self.session, BusinessTaxInfoModel, values, conflict_column="business_id"
        )
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: BusinessTaxInfoModel) -> BusinessTaxInfo:
        return BusinessTaxInfo(
            id=model.id,
            business_id=model.business_id,
            business_entity_type=model.business_entity_type,
            legal_business_name=model.legal_business_name,
            tax_id=model.tax_id,
            tax_id_type=model.tax_id_type,
            tax_address_line1=model.tax_address_line1,
            tax_address_line2=model.tax_address_line2,
            tax_city=model.tax_city,
            tax_state=model.tax_state,
            tax_postal_code=model.tax_postal_code,
            tax_country=model.tax_country,
            tax_contact_name=model.tax_contact_name,
            tax_contact_email=model.tax_contact_email,
            tax_contact_phone=model.tax_contact_phone,
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )


__all__ = ["BusinessTaxInfoRepository"]
