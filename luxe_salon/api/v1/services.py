from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from luxe_salon.api.responses import error_response
from luxe_salon.api.v1.schemas import (
    Gender,
    MessageResponse,
    ServiceCreateSchema,
    ServiceListResponse,
    ServiceResponse,
    ServiceSchema,
    ServiceUpdateSchema,
)
from luxe_salon.application.exceptions import NotFoundError, StorageError
from luxe_salon.application.use_cases.services import ServiceAdminUseCase, ServiceFilter
from luxe_salon.wiring.dependencies import get_service_admin_use_case

router = APIRouter(prefix="/api/services")


@router.get("", response_model=ServiceListResponse)
def list_services(
    gender: Gender | None = Query(None),
    category: str | None = Query(None),
    subcategory: str | None = Query(None),
    popular: str | None = Query(None),
    uc: ServiceAdminUseCase = Depends(get_service_admin_use_case),
):
    service_filter = ServiceFilter(
        gender=gender.value if gender else None,
        category=category,
        subcategory=subcategory,
        popular=popular == "true",
    )
    try:
        services = uc.list_services(service_filter)
    except StorageError as e:
        return error_response(500, str(e))

    return ServiceListResponse(
        count=len(services),
        data=[ServiceSchema.from_entity(s) for s in services],
    )


@router.get("/{service_id}", response_model=ServiceResponse)
def get_service(
    service_id: int,
    uc: ServiceAdminUseCase = Depends(get_service_admin_use_case),
):
    try:
        service = uc.get_service(service_id)
    except NotFoundError as e:
        return error_response(404, str(e))
    except StorageError as e:
        return error_response(500, str(e))

    return ServiceResponse(data=ServiceSchema.from_entity(service))


@router.post("", response_model=ServiceResponse, status_code=201)
def create_service(
    req: ServiceCreateSchema,
    uc: ServiceAdminUseCase = Depends(get_service_admin_use_case),
):
    try:
        service = uc.create_service(req.model_dump(mode="json"))
    except StorageError as e:
        return error_response(500, str(e))

    return ServiceResponse(data=ServiceSchema.from_entity(service))


@router.put("/{service_id}", response_model=ServiceResponse)
def update_service(
    service_id: int,
    req: ServiceUpdateSchema,
    uc: ServiceAdminUseCase = Depends(get_service_admin_use_case),
):
    try:
        service = uc.update_service(service_id, req.changes())
    except NotFoundError as e:
        return error_response(404, str(e))
    except StorageError as e:
        return error_response(500, str(e))

    return ServiceResponse(data=ServiceSchema.from_entity(service))


@router.delete("/{service_id}", response_model=MessageResponse)
def delete_service(
    service_id: int,
    uc: ServiceAdminUseCase = Depends(get_service_admin_use_case),
):
    try:
        uc.delete_service(service_id)
    except NotFoundError as e:
        return error_response(404, str(e))
    except StorageError as e:
        return error_response(500, str(e))

    return MessageResponse(message="Service deleted")
