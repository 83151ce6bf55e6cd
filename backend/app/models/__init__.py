"""
ORM models. Importing this package registers every table on Base.metadata,
which relationship resolution and Alembic autogenerate both depend on.
"""

from app.models.appointment import Appointment
from app.models.customer import Customer
from app.models.employee import Employee
from app.models.service import Service
from app.models.user import User

__all__ = ["Appointment", "Customer", "Employee", "Service", "User"]
