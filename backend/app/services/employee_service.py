"""
Clinic Booking API — Employee Service
=======================================

What:  CRUD workflow for employees. An employee's first + last name must be
       unique at create time (not re-checked on update).
"""

import logging
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import ConflictError, NotFoundError
from app.models.employee import Employee
from app.repositories import EmployeeRepository
from app.schemas.employee import EmployeeRequest, EmployeeResponse

logger = logging.getLogger(__name__)


class EmployeeService:

    async def list_employees(self, db: AsyncSession) -> List[EmployeeResponse]:
        employees = await EmployeeRepository(db).list()
        return [EmployeeResponse.model_validate(e) for e in employees]

    async def get_employee(self, db: AsyncSession, employee_id: int) -> EmployeeResponse:
        employee = await EmployeeRepository(db).get_by_id(employee_id)
        if employee is None:
            raise NotFoundError(resource="employee", resource_id=employee_id)
        return EmployeeResponse.model_validate(employee)

    async def create_employee(self, db: AsyncSession, payload: EmployeeRequest) -> EmployeeResponse:
        repo = EmployeeRepository(db)
        if await repo.get_by_name(payload.first_name, payload.last_name) is not None:
            logger.warning(
                "Duplicate employee rejected: %s %s", payload.first_name, payload.last_name
            )
            raise ConflictError("Employee already exists", context={"field": "name"})

        employee = Employee(**payload.model_dump())
        repo.create(employee)
        await repo.save()

        logger.info("Employee %s created", employee.id)
        return EmployeeResponse.model_validate(employee)

    async def update_employee(
        self,
        db: AsyncSession,
        employee_id: int,
        payload: EmployeeRequest,
    ) -> EmployeeResponse:
        repo = EmployeeRepository(db)
        employee = await repo.get_by_id(employee_id)
        if employee is None:
            raise NotFoundError(resource="employee", resource_id=employee_id)

        for field, value in payload.model_dump().items():
            setattr(employee, field, value)
        await repo.update(employee)
        await repo.save()

        logger.info("Employee %s updated", employee_id)
        return EmployeeResponse.model_validate(employee)

    async def delete_employee(self, db: AsyncSession, employee_id: int) -> None:
        repo = EmployeeRepository(db)
        employee = await repo.get_by_id(employee_id)
        if employee is None:
            raise NotFoundError(resource="employee", resource_id=employee_id)

        await repo.remove(employee)
        try:
            await repo.save()
        except ConflictError as e:
            raise ConflictError("Employee has appointments and cannot be deleted", context=e.context) from e
        logger.info("Employee %s deleted", employee_id)


employee_service = EmployeeService()
