"""
Clinic Booking API — Repository Layer
=======================================

What:  Data access objects sitting between services and the SQLAlchemy session.
How:   `CRUDRepository[ModelT]` supplies the uniform create / read / update /
       delete / list / save contract; each entity gets a subclass that adds
       its own typed lookups (by email, by name, by slot, ...).

Usage:
    from app.repositories import CustomerRepository

    repo = CustomerRepository(db)
    existing = await repo.get_by_email("ana@example.com")
    repo.create(Customer(...))
    await repo.save()
"""

from app.repositories.appointment import AppointmentRepository
from app.repositories.base import CRUDRepository
from app.repositories.customer import CustomerRepository
from app.repositories.employee import EmployeeRepository
from app.repositories.service import ServiceRepository
from app.repositories.user import UserRepository

__all__ = [
    "CRUDRepository",
    "AppointmentRepository",
    "CustomerRepository",
    "EmployeeRepository",
    "ServiceRepository",
    "UserRepository",
]
