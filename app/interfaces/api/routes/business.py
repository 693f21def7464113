"""Endpoints for business tax info, opening hours and service categories."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.application.use_cases.business import (
    add_service_category,
    delete_service_categories,
    get_business_hours,
    get_tax_info,
    list_service_categories,
    save_tax_info,
    update_business_hours,
)
from app.infrastructure.database import get_db
from app.interfaces.api.schemas import (
    BusinessHoursResponse,
    BusinessHoursUpdate,
    BusinessHoursUpdateResponse,
    MessageResponse,
    ServiceCategoryCreate,
    ServiceCategoryCreated,
    ServiceCategoryDelete,
    ServiceCategoryList,
    ServiceCategoryRead,
    TaxInfoRead,
    TaxInfoResponse,
    TaxInfoSaveResponse,
    TaxInfoUpdate,
)

router = APIRouter(prefix="/api/business", tags=["business"])


def _business_id_query(
    business_id: str | None = Query(None),
    businessId: str | None = Query(None),
) -> str:
    return business_id or businessId or ""


@router.get("/tax-info", response_model=TaxInfoResponse)
def read_tax_info(
    business_id: str = Depends(_business_id_query),
    db: Session = Depends(get_db),
) -> TaxInfoResponse:
    tax_info = get_tax_info(db, business_id=business_id)
    return TaxInfoResponse(
        business_id=business_id,
        tax_info=TaxInfoRead.model_validate(tax_info) if tax_info else None,
    )


@router.put("/tax-info", response_model=TaxInfoSaveResponse)
def write_tax_info(
    payload: TaxInfoUpdate,
    db: Session = Depends(get_db),
) -> TaxInfoSaveResponse:
    saved = save_tax_info(db, **payload.model_dump())
    return TaxInfoSaveResponse(message="Saved", tax_info=TaxInfoRead.model_validate(saved))


@router.get("/hours", response_model=BusinessHoursResponse)
def read_business_hours(
    business_id: str = Depends(_business_id_query),
    db: Session = Depends(get_db),
) -> BusinessHoursResponse:
    profile = get_business_hours(db, business_id=business_id)
    return BusinessHoursResponse(
        business_id=profile.id,
        business_name=profile.business_name,
        business_hours=profile.business_hours,
    )


@router.put("/hours", response_model=BusinessHoursUpdateResponse)
def write_business_hours(
    payload: BusinessHoursUpdate,
    db: Session = Depends(get_db),
) -> BusinessHoursUpdateResponse:
    profile = update_business_hours(
        db, business_id=payload.business_id, business_hours=payload.business_hours
    )
    return BusinessHoursUpdateResponse(
        message="Business hours updated successfully",
        business_id=profile.id,
        business_name=profile.business_name,
        business_hours=profile.business_hours,
    )


@router.get("/service-categories", response_model=ServiceCategoryList)
def read_service_categories(
    business_id: str = Depends(_business_id_query),
    db: Session = Depends(get_db),
) -> ServiceCategoryList:
    categories = list_service_categories(db, business_id=business_id)
    return ServiceCategoryList(
        data=[ServiceCategoryRead.model_validate(category) for category in categories]
    )


@router.post(
    "/service-categories",
    response_model=ServiceCategoryCreated,
    status_code=status.HTTP_201_CREATED,
)
def create_service_category(
    payload: ServiceCategoryCreate,
    db: Session = Depends(get_db),
) -> ServiceCategoryCreated:
    category = add_service_category(
        db, business_id=payload.business_id, category_id=payload.category_id
    )
    return ServiceCategoryCreated(data=ServiceCategoryRead.model_validate(category))


@router.post("/service-categories/delete", response_model=MessageResponse)
def remove_service_categories(
    payload: ServiceCategoryDelete,
    db: Session = Depends(get_db),
) -> MessageResponse:
    message = delete_service_categories(
        db, business_id=payload.business_id, category_id=payload.category_id
    )
    return MessageResponse(message=message)


__all__ = ["router"]
