from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from luxe_salon.api.responses import error_response
from luxe_salon.api.v1.schemas import Gender, NameListResponse
from luxe_salon.application.exceptions import StorageError
from luxe_salon.application.use_cases.services import ServiceAdminUseCase
from luxe_salon.wiring.dependencies import get_service_admin_use_case

router = APIRouter(prefix="/api/categories")


@router.get("", response_model=NameListResponse)
def list_categories(
    gender: Gender | None = Query(None),
    uc: ServiceAdminUseCase = Depends(get_service_admin_use_case),
):
    try:
        categories = uc.list_categories(gender.value if gender else None)
    except StorageError as e:
        return error_response(500, str(e))
    return NameListResponse(data=categories)


@router.get("/{category}/subcategories", response_model=NameListResponse)
def list_subcategories(
    category: str,
    gender: Gender | None = Query(None),
    uc: ServiceAdminUseCase = Depends(get_service_admin_use_case),
):
    try:
        subcategories = uc.list_subcategories(category, gender.value if gender else None)
    except StorageError as e:
        return error_response(500, str(e))
    return NameListResponse(data=subcategories)
