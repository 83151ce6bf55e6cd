"""
Clinic Booking API — Request Validators
=========================================

What:  Business-rule checks run on a request body before any workflow step.
How:   Each rule is a (predicate, message) pair; a validator returns the
       message of every rule that fails, so the client gets all problems in
       one response instead of fixing them one at a time.
Who:   Called by AppointmentService before touching the store.
"""

from typing import Callable, List, Tuple

from app.exceptions import ValidationError
from app.schemas.appointment import AppointmentRequest

Rule = Tuple[Callable[[AppointmentRequest], bool], str]

APPOINTMENT_RULES: List[Rule] = [
    (lambda p: p.customer_id > 0, "Customer Id is required"),
    (lambda p: p.employee_id > 0, "Employee Id is required"),
    (lambda p: p.service_id > 0, "Service Id is required"),
    (lambda p: p.appointment_datetime is not None, "Appointment Date Time is required"),
    (lambda p: bool(p.status and p.status.strip()), "Status is required"),
]


def validate_appointment_request(payload: AppointmentRequest) -> List[str]:
    """
    Check an appointment payload against APPOINTMENT_RULES.

    Returns:
        Failed rule messages, in rule order. Empty when the payload is valid.
    """
    return [message for check, message in APPOINTMENT_RULES if not check(payload)]


def ensure_valid_appointment(payload: AppointmentRequest) -> None:
    """
    Raises:
        ValidationError: carrying one message per failed rule
    """
    errors = validate_appointment_request(payload)
    if errors:
        raise ValidationError(
            message="Appointment request is invalid",
            error_messages=errors,
        )
