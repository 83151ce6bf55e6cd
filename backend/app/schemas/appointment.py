"""
Clinic Booking API — Appointment Schemas
==========================================

What:  Request and response models for /api/appointment.

AppointmentRequest is deliberately permissive (every field has a default):
required-field rules are enforced by app.validators so that a bad booking
comes back as one 400 envelope listing every failed rule, rather than
FastAPI's per-field 422.

Date-times:
    Slots are compared by exact value, so they are normalized on the way in:
    timezone-aware inputs are converted to UTC and stored naive.
"""

from datetime import datetime, timezone
from typing import List, Optional

from pydantic import Field, field_validator

from app.schemas.common import CamelModel
from app.schemas.customer import CustomerResponse
from app.schemas.employee import EmployeeResponse
from app.schemas.service import ServiceResponse


class AppointmentRequest(CamelModel):
    """Body of POST /api/appointment and PUT /api/appointment?id=."""

    customer_id: int = 0
    employee_id: int = 0
    service_id: int = 0
    appointment_datetime: Optional[datetime] = Field(default=None, alias="appointmentDateTime")
    status: str = Field(default="", max_length=50)
    notes: str = ""

    @field_validator("appointment_datetime")
    @classmethod
    def normalize_slot(cls, v: Optional[datetime]) -> Optional[datetime]:
        if v is not None and v.tzinfo is not None:
            return v.astimezone(timezone.utc).replace(tzinfo=None)
        return v


class AppointmentResponse(CamelModel):
    """An appointment with its customer, employee and service populated."""

    id: int
    customer_id: int
    employee_id: int
    service_id: int
    appointment_datetime: datetime = Field(alias="appointmentDateTime")
    status: str
    notes: str
    customer: Optional[CustomerResponse] = None
    employee: Optional[EmployeeResponse] = None
    service: Optional[ServiceResponse] = None


class AppointmentPage(CamelModel):
    """One page of appointments plus the numbers needed to render a pager."""

    items: List[AppointmentResponse]
    page_number: int
    page_size: int
    total_count: int
    total_pages: int
