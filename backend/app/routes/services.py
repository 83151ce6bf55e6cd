"""
Clinic Booking API — Treatment (Service) Route Handlers
=========================================================

What:  /api/service CRUD for the treatment catalogue. Updates take the
       service id as the `id` query parameter.
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.common import APIResponse
from app.schemas.service import ServiceRequest, ServiceResponse
from app.services.catalog_service import catalog_service

router = APIRouter(prefix="/api/service", tags=["Services"])

_ERRORS = {
    400: {"description": "Invalid body or name already in use", "model": APIResponse},
    404: {"description": "Service not found", "model": APIResponse},
}


@router.get("", response_model=APIResponse[list[ServiceResponse]], summary="List all services")
async def list_services(db: AsyncSession = Depends(get_db_session)) -> APIResponse:
    return APIResponse.ok(await catalog_service.list_services(db))


@router.get(
    "/{service_id}",
    response_model=APIResponse[ServiceResponse],
    responses=_ERRORS,
    summary="Get a service",
)
async def get_service(service_id: int, db: AsyncSession = Depends(get_db_session)) -> APIResponse:
    return APIResponse.ok(await catalog_service.get_service(db, service_id))


@router.post(
    "",
    status_code=201,
    response_model=APIResponse[ServiceResponse],
    responses=_ERRORS,
    summary="Add a service",
)
async def create_service(
    payload: ServiceRequest,
    db: AsyncSession = Depends(get_db_session),
) -> APIResponse:
    service = await catalog_service.create_service(db, payload)
    return APIResponse.ok(service, message="Service created successfully", status_code=201)


@router.put(
    "",
    response_model=APIResponse[ServiceResponse],
    responses=_ERRORS,
    summary="Overwrite a service",
)
async def update_service(
    payload: ServiceRequest,
    service_id: int = Query(alias="id"),
    db: AsyncSession = Depends(get_db_session),
) -> APIResponse:
    service = await catalog_service.update_service(db, service_id, payload)
    return APIResponse.ok(service, message="Service updated successfully")


@router.delete(
    "/{service_id}",
    response_model=APIResponse,
    responses=_ERRORS,
    summary="Delete a service",
)
async def delete_service(service_id: int, db: AsyncSession = Depends(get_db_session)) -> APIResponse:
    await catalog_service.delete_service(db, service_id)
    return APIResponse.ok(message="Service was deleted successfully")
