"""Use cases for the tax details a business reports for payouts."""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain.entities import (
    BUSINESS_ENTITY_TYPES,
    DEFAULT_BUSINESS_ENTITY_TYPE,
    DEFAULT_TAX_CONTACT_NAME,
    DEFAULT_TAX_COUNTRY,
    DEFAULT_TAX_ID_TYPE,
    TAX_ID_TYPES,
    BusinessTaxInfo,
)
from app.domain.exceptions import RequestValidationFailed, UpstreamServiceError
from app.infrastructure.repositories import (
    BusinessProfileRepository,
    BusinessTaxInfoRepository,
    ContactRepository,
)

logger = logging.getLogger(__name__)


def normalize_tax_id_type(value: str | None) -> str:
    candidate = (value or "").strip().upper()
    return candidate if candidate in TAX_ID_TYPES else DEFAULT_TAX_ID_TYPE


def normalize_business_entity_type(value: str | None) -> str:
    return value if value in BUSINESS_ENTITY_TYPES else DEFAULT_BUSINESS_ENTITY_TYPE


def _blank_to_none(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


def get_tax_info(session: Session, *, business_id: str) -> BusinessTaxInfo | None:
    """Return the stored tax info, or ``None`` when the business has none yet."""

    if not business_id:
        raise RequestValidationFailed("business_id parameter is required")
    try:
        return BusinessTaxInfoRepository(session).get_by_business_id(business_id)
    except SQLAlchemyError as exc:
        raise UpstreamServiceError("Failed to fetch tax info", details=str(exc)) from exc


def _resolve_contact(
    session: Session,
    business_id: str,
    contact_name: str | None,
    contact_email: str | None,
) -> tuple[str, str | None]:
    """Fill missing contact fields from the business profile, then its owner."""

    if contact_name and contact_email:
        return contact_name, contact_email

    profile = BusinessProfileRepository(session).get(business_id)
    if profile is not None:
        if not contact_name:
            contact_name = profile.business_name or None
        if not contact_email:
            contact_email = profile.contact_email or None

    if not contact_email:
        owner = ContactRepository(session).get_business_owner(business_id)
        if owner is not None:
            if owner.email:
                contact_email = owner.email
            elif owner.full_name() and not contact_name:
                contact_name = owner.full_name()

    return contact_name or DEFAULT_TAX_CONTACT_NAME, contact_email


def save_tax_info(
    session: Session,
    *,
    business_id: str,
    business_entity_type: str | None = None,
    legal_business_name: str | None = None,
    tax_id: str | None = None,
    tax_id_type: str | None = None,
    tax_address_line1: str | None = None,
    tax_address_line2: str | None = None,
    tax_city: str | None = None,
    tax_state: str | None = None,
    tax_postal_code: str | None = None,
    tax_country: str | None = None,
    tax_contact_name: str | None = None,
    tax_contact_email: str | None = None,
    tax_contact_phone: str | None = None,
) -> BusinessTaxInfo:
    """Insert or replace the tax info of ``business_id``.

    Free-form values are normalised before storage; the contact falls back
    to the business profile and then to the owning provider.
    """

    if not business_id:
        raise RequestValidationFailed("business_id is required")

    try:
        contact_name, contact_email = _resolve_contact(
            session,
            business_id,
            _blank_to_none(tax_contact_name),
            _blank_to_none(tax_contact_email),
        )
    except SQLAlchemyError as exc:
        raise UpstreamServiceError("Failed to save tax info", details=str(exc)) from exc

    if not contact_email:
        raise RequestValidationFailed(
            "Contact email is required. Please ensure your business profile has a contact email."
        )

    tax_info = BusinessTaxInfo(
        business_id=business_id,
        business_entity_type=normalize_business_entity_type(business_entity_type),
        legal_business_name=_blank_to_none(legal_business_name),
        tax_id=_blank_to_none(tax_id),
        tax_id_type=normalize_tax_id_type(tax_id_type),
        tax_address_line1=_blank_to_none(tax_address_line1),
        tax_address_line2=_blank_to_none(tax_address_line2),
        tax_city=_blank_to_none(tax_city),
        tax_state=_blank_to_none(tax_state),
        tax_postal_code=_blank_to_none(tax_postal_code),
        tax_country=_blank_to_none(tax_country) or DEFAULT_TAX_COUNTRY,
        tax_contact_name=contact_name,
        tax_contact_email=contact_email,
        tax_contact_phone=_blank_to_none(tax_contact_phone),
    )

    try:
        saved = BusinessTaxInfoRepository(session).upsert(tax_info)
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("Tax info upsert failed for business %s", business_id)
        raise UpstreamServiceError("Failed to save tax info", details=str(exc)) from exc

    logger.info("Saved tax info for business %s", business_id)
    return saved


__all__ = [
    "get_tax_info",
    "normalize_business_entity_type",
    "normalize_tax_id_type",
    "save_tax_info",
]
