"""
Clinic Booking API — Customer Route Handlers
==============================================

What:  /api/customer CRUD. The customer id of an update travels in the path.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.common import APIResponse
from app.schemas.customer import CustomerRequest, CustomerResponse
from app.services.customer_service import customer_service

router = APIRouter(prefix="/api/customer", tags=["Customers"])

_ERRORS = {
    400: {"description": "Invalid body or email already registered", "model": APIResponse},
    404: {"description": "Customer not found", "model": APIResponse},
}


@router.get("", response_model=APIResponse[list[CustomerResponse]], summary="List all customers")
async def list_customers(db: AsyncSession = Depends(get_db_session)) -> APIResponse:
    return APIResponse.ok(await customer_service.list_customers(db))


@router.get(
    "/{customer_id}",
    response_model=APIResponse[CustomerResponse],
    responses=_ERRORS,
    summary="Get a customer",
)
async def get_customer(customer_id: int, db: AsyncSession = Depends(get_db_session)) -> APIResponse:
    return APIResponse.ok(await customer_service.get_customer(db, customer_id))


@router.post(
    "",
    status_code=201,
    response_model=APIResponse[CustomerResponse],
    responses=_ERRORS,
    summary="Register a customer",
)
async def create_customer(
    payload: CustomerRequest,
    db: AsyncSession = Depends(get_db_session),
) -> APIResponse:
    customer = await customer_service.create_customer(db, payload)
    return APIResponse.ok(customer, message="Customer created successfully", status_code=201)


@router.put(
    "/{customer_id}",
    response_model=APIResponse[CustomerResponse],
    responses=_ERRORS,
    summary="Overwrite a customer",
)
async def update_customer(
    customer_id: int,
    payload: CustomerRequest,
    db: AsyncSession = Depends(get_db_session),
) -> APIResponse:
    customer = await customer_service.update_customer(db, customer_id, payload)
    return APIResponse.ok(customer, message="Customer updated successfully")


@router.delete(
    "/{customer_id}",
    response_model=APIResponse,
    responses=_ERRORS,
    summary="Delete a customer",
)
async def delete_customer(customer_id: int, db: AsyncSession = Depends(get_db_session)) -> APIResponse:
    await customer_service.delete_customer(db, customer_id)
    return APIResponse.ok(message="Customer was deleted successfully")
