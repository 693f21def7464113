"""Domain entities describing a provider business."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

BUSINESS_ENTITY_TYPES: tuple[str, ...] = (
    "sole_proprietorship",
    "partnership",
    "llc",
    "corporation",
    "non_profit",
)
DEFAULT_BUSINESS_ENTITY_TYPE = "llc"
TAX_ID_TYPES: tuple[str, ...] = ("EIN", "SSN")
DEFAULT_TAX_ID_TYPE = "EIN"
DEFAULT_TAX_COUNTRY = "US"
DEFAULT_TAX_CONTACT_NAME = "Business Owner"


@dataclass
class BusinessProfile:
    """Public profile of a business listed on the marketplace."""

    id: str
    business_name: str
    contact_email: str | None = None
    phone: str | None = None
    business_hours: dict[str, Any] = field(default_factory=dict)
    created_at: datetime | None = None


@dataclass
class BusinessTaxInfo:
    """Tax reporting details of a business. One row per business."""

    business_id: str
    business_entity_type: str
    tax_id_type: str
    tax_contact_name: str
    tax_contact_email: str
    id: int | None = None
    legal_business_name: str | None = None
    tax_id: str | None = None
    tax_address_line1: str | None = None
    tax_address_line2: str | None = None
    tax_city: str | None = None
    tax_state: str | None = None
    tax_postal_code: str | None = None
    tax_country: str = DEFAULT_TAX_COUNTRY
    tax_contact_phone: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class BusinessServiceCategory:
    """Link between a business and a service category it offers."""

    id: int | None
    business_id: str
    category_id: str
    is_active: bool = True
    created_at: datetime | None = None


__all__ = [
    "BusinessProfile",
    "BusinessTaxInfo",
    "BusinessServiceCategory",
    "BUSINESS_ENTITY_TYPES",
    "DEFAULT_BUSINESS_ENTITY_TYPE",
    "TAX_ID_TYPES",
    "DEFAULT_TAX_ID_TYPE",
    "DEFAULT_TAX_COUNTRY",
    "DEFAULT_TAX_CONTACT_NAME",
]
