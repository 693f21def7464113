"""Lookups over customer and provider contact records."""

from __future__ import annotations

from sqlalchemy.orm import Session

from app.domain.entities import PROVIDER_ROLE_OWNER, CustomerProfile, Provider
from app.infrastructure.models import CustomerProfileModel, ProviderModel


class ContactRepository:
    """Read-only access to the contact details of marketplace users."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_customer_by_user_id(self, user_id: str) -> CustomerProfile | None:
        model = (
            self.session.query(CustomerProfileModel)
            .filter(CustomerProfileModel.user_id == user_id)
            .first()
        )
        if model is None:
            return None
        return CustomerProfile(
            id=model.id,
            user_id=model.user_id,
            first_name=model.first_name,
            last_name=model.last_name,
            email=model.email,
            phone=model.phone,
        )

    def get_provider_by_user_id(self, user_id: str) -> Provider | None:
        model = (
            self.session.query(ProviderModel)
            .filter(ProviderModel.user_id == user_id)
            .first()
        )
        return self._provider_to_entity(model) if model else None

    def get_business_owner(self, business_id: str) -> Provider | None:
        model = (
            self.session.query(ProviderModel)
            .filter(ProviderModel.business_id == business_id)
            .filter(ProviderModel.provider_role == PROVIDER_ROLE_OWNER)
            .first()
        )
        return self._provider_to_entity(model) if model else None

    @staticmethod
    def _provider_to_entity(model: ProviderModel) -> Provider:
        return Provider(
            id=model.id,
            user_id=model.user_id,
            business_id=model.business_id,
            provider_role=model.provider_role,
            first_name=model.first_name,
            last_name=model.last_name,
            email=model.email,
            phone=model.phone,
        )


__all__ = ["ContactRepository"]
