"""SQLAlchemy models for customer and provider contact records."""

from sqlalchemy import Column, String

from app.infrastructure.database import Base


class CustomerProfileModel(Base):
    """Database representation of a customer profile."""

    __tablename__ = "customer_profiles"

    id = Column(String(36), primary_key=True)
    user_id = Column(String(36), nullable=False, unique=True, index=True)
    first_name = Column(String(100), nullable=True)
    last_name = Column(String(100), nullable=True)
    email = Column(String(255), nullable=True)
    phone = Column(String(32), nullable=True)


class ProviderModel(Base):
    """Database representation of a provider account."""

    __tablename__ = "providers"

    id = Column(String(36), primary_key=True)
    user_id = Column(String(36), nullable=False, index=True)
    business_id = Column(String(36), nullable=True, index=True)
    provider_role = Column(String(32), nullable=True)
    first_name = Column(String(100), nullable=True)
    last_name = Column(String(100), nullable=True)
    email = Column(String(255), nullable=True)
    phone = Column(String(32), nullable=True)


__all__ = ["CustomerProfileModel", "ProviderModel"]
