"""
Clinic Booking API — Appointment Repository
=============================================

What:  Appointment data access with eager loading of the customer, employee
       and service associations.
How:   selectinload() issues one extra SELECT per association for the whole
       result set. Lazy loading is not available on an AsyncSession, so every
       query whose rows are serialized with associations must load them here.
"""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from app.models.appointment import Appointment
from app.repositories.base import CRUDRepository

_WITH_ASSOCIATIONS = (
    selectinload(Appointment.customer),
    selectinload(Appointment.employee),
    selectinload(Appointment.service),
)


class AppointmentRepository(CRUDRepository[Appointment]):
    model = Appointment

    async def get_by_datetime(self, appointment_datetime: datetime) -> Optional[Appointment]:
        """The appointment occupying exactly this slot, if any."""
        result = await self.session.execute(
            select(Appointment).where(Appointment.appointment_datetime == appointment_datetime)
        )
        return result.scalars().first()

    async def get_with_associations(self, appointment_id: int) -> Optional[Appointment]:
        result = await self.session.execute(
            select(Appointment)
            .options(*_WITH_ASSOCIATIONS)
            .where(Appointment.id == appointment_id)
        )
        return result.scalar_one_or_none()

    async def list_page(self, offset: int, limit: int) -> List[Appointment]:
        """Rows [offset, offset + limit) in storage order, associations loaded."""
        result = await self.session.execute(
            select(Appointment)
            .options(*_WITH_ASSOCIATIONS)
            .order_by(Appointment.id)
            .offset(offset)
            .limit(limit)
        )
        return list(result.scalars().all())

    async def first_with_customer_and_employee(self) -> Optional[Appointment]:
        """
        One arbitrary appointment (lowest id) with customer and employee loaded.

        The service association is loaded as well so the row serializes like
        any other appointment.
        """
        result = await self.session.execute(
            select(Appointment)
            .options(*_WITH_ASSOCIATIONS)
            .order_by(Appointment.id)
            .limit(1)
        )
        return result.scalars().first()
