"""Use cases for business profile data."""

from .business_hours import get_business_hours, update_business_hours
from .service_categories import (
    add_service_category,
    delete_service_categories,
    list_service_categories,
)
from .tax_info import get_tax_info, save_tax_info

__all__ = [
    "add_service_category",
    "delete_service_categories",
    "get_business_hours",
    "get_tax_info",
    "list_service_categories",
    "save_tax_info",
    "update_business_hours",
]
