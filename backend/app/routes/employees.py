"""
Clinic Booking API — Employee Route Handlers
==============================================

What:  /api/employee CRUD. Updates take the employee id as the `id` query
       parameter (PUT /api/employee?id=3).
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.common import APIResponse
from app.schemas.employee import EmployeeRequest, EmployeeResponse
from app.services.employee_service import employee_service

router = APIRouter(prefix="/api/employee", tags=["Employees"])

_ERRORS = {
    400: {"description": "Invalid body or name already in use", "model": APIResponse},
    404: {"description": "Employee not found", "model": APIResponse},
}


@router.get("", response_model=APIResponse[list[EmployeeResponse]], summary="List all employees")
async def list_employees(db: AsyncSession = Depends(get_db_session)) -> APIResponse:
    return APIResponse.ok(await employee_service.list_employees(db))


@router.get(
    "/{employee_id}",
    response_model=APIResponse[EmployeeResponse],
    responses=_ERRORS,
    summary="Get an employee",
)
async def get_employee(employee_id: int, db: AsyncSession = Depends(get_db_session)) -> APIResponse:
    return APIResponse.ok(await employee_service.get_employee(db, employee_id))


@router.post(
    "",
    status_code=201,
    response_model=APIResponse[EmployeeResponse],
    responses=_ERRORS,
    summary="Add an employee",
)
async def create_employee(
    payload: EmployeeRequest,
    db: AsyncSession = Depends(get_db_session),
) -> APIResponse:
    employee = await employee_service.create_employee(db, payload)
    return APIResponse.ok(employee, message="Employee created successfully", status_code=201)


@router.put(
    "",
    response_model=APIResponse[EmployeeResponse],
    responses=_ERRORS,
    summary="Overwrite an employee",
)
async def update_employee(
    payload: EmployeeRequest,
    employee_id: int = Query(alias="id"),
    db: AsyncSession = Depends(get_db_session),
) -> APIResponse:
    employee = await employee_service.update_employee(db, employee_id, payload)
    return APIResponse.ok(employee, message="Employee updated successfully")


@router.delete(
    "/{employee_id}",
    response_model=APIResponse,
    responses=_ERRORS,
    summary="Delete an employee",
)
async def delete_employee(employee_id: int, db: AsyncSession = Depends(get_db_session)) -> APIResponse:
    await employee_service.delete_employee(db, employee_id)
    return APIResponse.ok(message="Employee was deleted successfully")
