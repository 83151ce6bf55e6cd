"""
Clinic Booking API — Appointment Route Handlers
=================================================

What:  /api/appointment endpoints.

Auth (per route):
    GET  list / detail / first   bearer token required
    PUT                          bearer token required
    POST, DELETE                 open (customers book and cancel without an account)

Pagination:
    GET /api/appointment?pageNumber=2&pageSize=10
    The page's appointments are the envelope result. Paging metadata travels
    in headers: X-Page-Number, X-Page-Size, X-Total-Count, X-Total-Pages.
"""

import logging

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.appointment import AppointmentRequest, AppointmentResponse
from app.schemas.common import APIResponse
from app.security import require_token
from app.services.appointment_service import appointment_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/appointment", tags=["Appointments"])

_ERRORS = {
    400: {"description": "Validation failed or slot already taken", "model": APIResponse},
    401: {"description": "Missing or invalid bearer token", "model": APIResponse},
    404: {"description": "Appointment or page not found", "model": APIResponse},
}


@router.get(
    "",
    response_model=APIResponse[list[AppointmentResponse]],
    responses=_ERRORS,
    dependencies=[Depends(require_token)],
    summary="List appointments, one page at a time",
)
async def list_appointments(
    response: Response,
    page_number: int = Query(default=1, alias="pageNumber", description="1-based page number"),
    page_size: int = Query(default=10, alias="pageSize", description="Appointments per page"),
    db: AsyncSession = Depends(get_db_session),
) -> APIResponse:
    page = await appointment_service.list_appointments(db, page_number, page_size)
    response.headers["X-Total-Count"] = str(page.total_count)
    response.headers["X-Total-Pages"] = str(page.total_pages)
    response.headers["X-Page-Number"] = str(page.page_number)
    response.headers["X-Page-Size"] = str(page.page_size)
    return APIResponse.ok(page.items)


@router.get(
    "/first",
    response_model=APIResponse[AppointmentResponse],
    responses=_ERRORS,
    dependencies=[Depends(require_token)],
    summary="Any one appointment with customer and employee",
)
async def get_first_appointment(db: AsyncSession = Depends(get_db_session)) -> APIResponse:
    return APIResponse.ok(await appointment_service.get_first_appointment(db))


@router.get(
    "/{appointment_id}",
    response_model=APIResponse[AppointmentResponse],
    responses=_ERRORS,
    dependencies=[Depends(require_token)],
    summary="Get one appointment with customer, employee and service",
)
async def get_appointment(
    appointment_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> APIResponse:
    return APIResponse.ok(await appointment_service.get_appointment(db, appointment_id))


@router.post(
    "",
    status_code=201,
    response_model=APIResponse[AppointmentResponse],
    responses=_ERRORS,
    summary="Book an appointment",
    description=(
        "Books a slot for an existing customer, employee and service. "
        "Fails with 400 if the request is incomplete, a referenced record does "
        "not exist, or another appointment already holds the exact date-time."
    ),
)
async def create_appointment(
    payload: AppointmentRequest,
    db: AsyncSession = Depends(get_db_session),
) -> APIResponse:
    appointment = await appointment_service.create_appointment(db, payload)
    return APIResponse.ok(
        appointment,
        message="Appointment created successfully",
        status_code=201,
    )


@router.put(
    "",
    response_model=APIResponse[AppointmentResponse],
    responses=_ERRORS,
    dependencies=[Depends(require_token)],
    summary="Overwrite an appointment",
)
async def update_appointment(
    payload: AppointmentRequest,
    appointment_id: int = Query(alias="id", description="Appointment to overwrite"),
    db: AsyncSession = Depends(get_db_session),
) -> APIResponse:
    appointment = await appointment_service.update_appointment(db, appointment_id, payload)
    return APIResponse.ok(appointment, message="Appointment updated successfully")


@router.delete(
    "/{appointment_id}",
    response_model=APIResponse,
    responses=_ERRORS,
    summary="Cancel (delete) an appointment",
)
async def delete_appointment(
    appointment_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> APIResponse:
    await appointment_service.delete_appointment(db, appointment_id)
    return APIResponse.ok(message="Appointment was deleted successfully")
