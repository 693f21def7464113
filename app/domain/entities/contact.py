"""Contact records used to reach customers and providers."""

from dataclasses import dataclass

PROVIDER_ROLE_OWNER = "owner"


@dataclass
class CustomerProfile:
    """Contact details of a marketplace customer."""

    id: str
    user_id: str
    first_name: str | None
    last_name: str | None
    email: str | None
    phone: str | None


@dataclass
class Provider:
    """Contact details of a provider working for a business."""

    id: str
    user_id: str
    business_id: str | None
    provider_role: str | None
    first_name: str | None
    last_name: str | None
    email: str | None
    phone: str | None

    def full_name(self) -> str | None:
        if self.first_name and self.last_name:
            return f"{self.first_name} {self.last_name}"
        return None


__all__ = ["CustomerProfile", "Provider", "PROVIDER_ROLE_OWNER"]
