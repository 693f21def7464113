"""SQLAlchemy models for business profiles and their related records."""

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    UniqueConstraint,
)

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime

from ._types import json_type


class BusinessProfileModel(Base):
    """Database representation of a business profile."""

    __tablename__ = "business_profiles"

    id = Column(String(36), primary_key=True)
    business_name = Column(String(255), nullable=False)
    contact_email = Column(String(255), nullable=True)
    phone = Column(String(32), nullable=True)
    business_hours = Column(json_type, nullable=False, default=dict)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)


class BusinessTaxInfoModel(Base):
    """Database representation of a business' tax reporting details."""

    __tablename__ = "business_stripe_tax_info"

    id = Column(Integer, primary_key=True, index=True)
    business_id = Column(String(36), nullable=False, unique=True, index=True)
    business_entity_type = Column(String(32), nullable=False)
    legal_business_name = Column(String(255), nullable=True)
    tax_id = Column(String(32), nullable=True)
    tax_id_type = Column(String(3), nullable=False)
    tax_address_line1 = Column(String(255), nullable=True)
    tax_address_line2 = Column(String(255), nullable=True)
    tax_city = Column(String(100), nullable=True)
    tax_state = Column(String(50), nullable=True)
    tax_postal_code = Column(String(20), nullable=True)
    tax_country = Column(String(2), nullable=False, default="US")
    tax_contact_name = Column(String(255), nullable=False)
    tax_contact_email = Column(String(255), nullable=False)
    tax_contact_phone = Column(String(32), nullable=True)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(DateTime(), nullable=True)


class BusinessServiceCategoryModel(Base):
    """Database representation of a category offered by a business."""

    __tablename__ = "business_service_categories"
    __table_args__ = (
        UniqueConstraint(
            "business_id", "category_id", name="uq_business_service_category"
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    business_id = Column(
        String(36),
        ForeignKey("business_profiles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    category_id = Column(String(36), nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)


__all__ = [
    "BusinessProfileModel",
    "BusinessTaxInfoModel",
    "BusinessServiceCategoryModel",
]
