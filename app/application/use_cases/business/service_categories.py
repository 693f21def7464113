"""Use cases for the service categories a business offers."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain.entities import BusinessServiceCategory
from app.domain.exceptions import (
    ConflictError,
    RequestValidationFailed,
    UpstreamServiceError,
)
from app.infrastructure.repositories import BusinessServiceCategoryRepository

logger = logging.getLogger(__name__)


def list_service_categories(
    session: Session, *, business_id: str
) -> Sequence[BusinessServiceCategory]:
    if not business_id:
        raise RequestValidationFailed("Missing required fields", details="business_id")
    try:
        return BusinessServiceCategoryRepository(session).list_for_business(business_id)
    except SQLAlchemyError as exc:
        raise UpstreamServiceError(
            "Failed to fetch service categories", details=str(exc)
        ) from exc


def add_service_category(
    session: Session, *, business_id: str, category_id: str
) -> BusinessServiceCategory:
    """Link ``category_id`` to ``business_id``. The link must not exist yet."""

    missing = [
        name
        for name, value in (("businessId", business_id), ("categoryId", category_id))
        if not value
    ]
    if missing:
        raise RequestValidationFailed("Missing required fields", details=", ".join(missing))

    category = BusinessServiceCategory(
        id=None, business_id=business_id, category_id=category_id
    )
    try:
        return BusinessServiceCategoryRepository(session).create(category)
    except IntegrityError as exc:
        session.rollback()
        raise ConflictError(
            "Category already added for business", details=str(exc.orig)
        ) from exc
    except SQLAlchemyError as exc:
        session.rollback()
        raise UpstreamServiceError(
            "Failed to add service category", details=str(exc)
        ) from exc


def delete_service_categories(
    session: Session, *, business_id: str, category_id: str | None = None
) -> str:
    """Delete one category of a business, or all of them without ``category_id``.

    Returns the confirmation message for the caller.
    """

    if not business_id:
        raise RequestValidationFailed("Missing required fields", details="businessId")

    repository = BusinessServiceCategoryRepository(session)
    try:
        if category_id:
            deleted = repository.delete(business_id, category_id)
            message = "Category deleted successfully"
        else:
            deleted = repository.delete_all_for_business(business_id)
            message = "All categories deleted successfully for business"
    except SQLAlchemyError as exc:
        session.rollback()
        raise UpstreamServiceError(
            "Failed to delete service categories", details=str(exc)
        ) from exc

    logger.info("Deleted %d service categories for business %s", deleted, business_id)
    return message


__all__ = [
    "add_service_category",
    "delete_service_categories",
    "list_service_categories",
]
