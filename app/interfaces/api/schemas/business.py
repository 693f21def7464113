"""Schemas for business tax info, hours and service category endpoints."""

from datetime import datetime
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class TaxInfoUpdate(BaseModel):
    business_id: str = Field(
        ..., min_length=1, validation_alias=AliasChoices("business_id", "businessId")
    )
    business_entity_type: str | None = None
    legal_business_name: str | None = None
    tax_id: str | None = None
    tax_id_type: str | None = None
    tax_address_line1: str | None = None
    tax_address_line2: str | None = None
    tax_city: str | None = None
    tax_state: str | None = None
    tax_postal_code: str | None = None
    tax_country: str | None = None
    tax_contact_name: str | None = None
    tax_contact_email: str | None = None
    tax_contact_phone: str | None = None


class TaxInfoRead(BaseModel):
    id: int | None
    business_id: str
    business_entity_type: str
    legal_business_name: str | None
    tax_id: str | None
    tax_id_type: str
    tax_address_line1: str | None
    tax_address_line2: str | None
    tax_city: str | None
    tax_state: str | None
    tax_postal_code: str | None
    tax_country: str
    tax_contact_name: str
    tax_contact_email: str
    tax_contact_phone: str | None
    created_at: datetime | None
    updated_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class TaxInfoResponse(BaseModel):
    business_id: str
    tax_info: TaxInfoRead | None


class TaxInfoSaveResponse(BaseModel):
    message: str
    tax_info: TaxInfoRead


class BusinessHoursUpdate(BaseModel):
    business_id: str = Field(
        ..., min_length=1, validation_alias=AliasChoices("business_id", "businessId")
    )
    business_hours: dict[str, Any] = Field(
        ..., validation_alias=AliasChoices("business_hours", "businessHours")
    )


class BusinessHoursResponse(BaseModel):
    business_id: str
    business_name: str
    business_hours: dict[str, Any]


class BusinessHoursUpdateResponse(BusinessHoursResponse):
    success: bool = True
    message: str


class ServiceCategoryCreate(BaseModel):
    business_id: str = Field(
        ..., min_length=1, validation_alias=AliasChoices("businessId", "business_id")
    )
    category_id: str = Field(
        ..., min_length=1, validation_alias=AliasChoices("categoryId", "category_id")
    )


class ServiceCategoryDelete(BaseModel):
    business_id: str = Field(
        ..., min_length=1, validation_alias=AliasChoices("businessId", "business_id")
    )
    category_id: str | None = Field(
        None, validation_alias=AliasChoices("categoryId", "category_id")
    )


class ServiceCategoryRead(BaseModel):
    id: int
    business_id: str
    category_id: str
    is_active: bool
    created_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class ServiceCategoryList(BaseModel):
    data: list[ServiceCategoryRead]


class ServiceCategoryCreated(BaseModel):
    data: ServiceCategoryRead


class MessageResponse(BaseModel):
    message: str
