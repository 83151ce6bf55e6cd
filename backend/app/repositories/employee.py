"""Employee data access."""

from typing import Optional

from sqlalchemy import select

from app.models.employee import Employee
from app.repositories.base import CRUDRepository


class EmployeeRepository(CRUDRepository[Employee]):
    model = Employee

    async def get_by_name(self, first_name: str, last_name: str) -> Optional[Employee]:
        result = await self.session.execute(
            select(Employee).where(
                Employee.first_name == first_name,
                Employee.last_name == last_name,
            )
        )
        return result.scalar_one_or_none()
