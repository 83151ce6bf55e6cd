"""
Clinic Booking API — Appointment Service (Booking Workflow)
=============================================================

What:  Orchestrates booking, reading, paging, rescheduling and cancelling
       appointments.
How:   Composes AppointmentRepository with the customer, employee and service
       repositories for cross-entity lookups.
Who:   Called by the /api/appointment route handlers.

Booking Flow (POST /api/appointment):
    ┌──────────┐    ┌────────────┐    ┌────────────┐    ┌────────────┐    ┌──────────┐
    │ Validate │───▶│ Slot free? │───▶│ Resolve    │───▶│ Create +   │───▶│ Response │
    │ payload  │    │            │    │ references │    │ save       │    │ (201)    │
    └──────────┘    └────────────┘    └────────────┘    └────────────┘    └──────────┘
         │                │                 │                  │
         ▼                ▼                 ▼                  ▼
    ValidationError  ConflictError    ValidationError     ConflictError
                                                          (lost slot race)

    Every rejection happens before anything is staged, so a failed booking
    never leaves a partial row behind.

Design:
    AppointmentService is stateless; the request's AsyncSession is passed into
    every call and repositories are built per call on top of it.
"""

import logging
import math
from typing import Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import (
    ConflictError,
    InvalidPageError,
    NotFoundError,
    ValidationError,
)
from app.models.appointment import Appointment
from app.models.customer import Customer
from app.models.employee import Employee
from app.models.service import Service
from app.repositories import (
    AppointmentRepository,
    CustomerRepository,
    EmployeeRepository,
    ServiceRepository,
)
from app.schemas.appointment import (
    AppointmentPage,
    AppointmentRequest,
    AppointmentResponse,
)
from app.validators import ensure_valid_appointment

logger = logging.getLogger(__name__)

SLOT_TAKEN_MESSAGE = "An appointment already exists for that time and date"

# Appears in the driver message of a slot index violation on SQLite and PostgreSQL
SLOT_COLUMN = "appointment_datetime"


class AppointmentService:
    """
    Business logic for appointments.

    Responsibilities:
        - create_appointment(): validate → slot check → resolve → persist
        - get_appointment(): single appointment with associations
        - list_appointments(): page-number pagination
        - update_appointment(): full overwrite of the mutable fields
        - delete_appointment(): remove by id
        - get_first_appointment(): one arbitrary appointment
    """

    async def create_appointment(
        self,
        db: AsyncSession,
        payload: AppointmentRequest,
    ) -> AppointmentResponse:
        """
        Book a new appointment.

        Raises:
            ValidationError: payload fails a rule, or a referenced customer,
                             employee or service does not exist
            ConflictError:   another appointment already holds the slot
        """
        # ── Step 1: Request rules ─────────────────────────────────────────
        ensure_valid_appointment(payload)

        repo = AppointmentRepository(db)

        # ── Step 2: Slot uniqueness ───────────────────────────────────────
        existing = await repo.get_by_datetime(payload.appointment_datetime)
        if existing is not None:
            logger.warning(
                "Slot %s already taken by appointment %s",
                payload.appointment_datetime.isoformat(),
                existing.id,
            )
            raise ConflictError(
                SLOT_TAKEN_MESSAGE,
                context={"appointment_datetime": payload.appointment_datetime.isoformat()},
            )

        # ── Step 3: References ────────────────────────────────────────────
        customer, employee, service = await self._resolve_references(db, payload)

        # ── Step 4: Persist ───────────────────────────────────────────────
        appointment = Appointment(
            customer=customer,
            employee=employee,
            service=service,
            appointment_datetime=payload.appointment_datetime,
            status=payload.status,
            notes=payload.notes,
        )
        repo.create(appointment)
        await self._save_slot(repo, payload)

        logger.info(
            "Appointment %s booked at %s (customer=%s, employee=%s, service=%s)",
            appointment.id,
            appointment.appointment_datetime.isoformat(),
            customer.id,
            employee.id,
            service.id,
        )
        return AppointmentResponse.model_validate(appointment)

    async def get_appointment(self, db: AsyncSession, appointment_id: int) -> AppointmentResponse:
        """
        Raises:
            NotFoundError: no appointment with this id (→ 404)
        """
        appointment = await AppointmentRepository(db).get_with_associations(appointment_id)
        if appointment is None:
            raise NotFoundError(resource="appointment", resource_id=appointment_id)
        return AppointmentResponse.model_validate(appointment)

    async def list_appointments(
        self,
        db: AsyncSession,
        page_number: int,
        page_size: int,
    ) -> AppointmentPage:
        """
        Return page `page_number` of all appointments, `page_size` per page.

        Pages are 1-based and ordered by storage (id) order:
            page n covers rows [(n - 1) * page_size, n * page_size)
        total_pages = ceil(total_count / page_size); an empty store has zero
        pages, so every page request against it is out of range.

        Raises:
            ValidationError:  page_size is not positive
            InvalidPageError: page_number outside 1..total_pages (→ 404)
        """
        if page_size <= 0:
            raise ValidationError(
                message="Invalid page size",
                error_messages=["Page size must be greater than zero"],
            )

        repo = AppointmentRepository(db)
        total_count = await repo.count()
        total_pages = math.ceil(total_count / page_size)

        if page_number < 1 or page_number > total_pages:
            logger.info(
                "Rejected page %d of %d (page_size=%d)", page_number, total_pages, page_size
            )
            raise InvalidPageError(page_number=page_number, total_pages=total_pages)

        rows = await repo.list_page(offset=(page_number - 1) * page_size, limit=page_size)
        return AppointmentPage(
            items=[AppointmentResponse.model_validate(row) for row in rows],
            page_number=page_number,
            page_size=page_size,
            total_count=total_count,
            total_pages=total_pages,
        )

    async def update_appointment(
        self,
        db: AsyncSession,
        appointment_id: int,
        payload: AppointmentRequest,
    ) -> AppointmentResponse:
        """
        Overwrite customer, employee, service, slot, status and notes.

        The slot is not pre-checked against other appointments; a collision is
        only caught by the unique index when the change is saved.

        Raises:
            NotFoundError:   no appointment with this id
            ValidationError: payload fails a rule or references a missing record
            ConflictError:   the new slot belongs to another appointment
        """
        repo = AppointmentRepository(db)
        appointment = await repo.get_with_associations(appointment_id)
        if appointment is None:
            raise NotFoundError(resource="appointment", resource_id=appointment_id)

        ensure_valid_appointment(payload)
        customer, employee, service = await self._resolve_references(db, payload)

        appointment.customer = customer
        appointment.employee = employee
        appointment.service = service
        appointment.appointment_datetime = payload.appointment_datetime
        appointment.status = payload.status
        appointment.notes = payload.notes

        await repo.update(appointment)
        await self._save_slot(repo, payload)

        logger.info("Appointment %s updated", appointment.id)
        return AppointmentResponse.model_validate(appointment)

    async def delete_appointment(self, db: AsyncSession, appointment_id: int) -> None:
        """
        Raises:
            NotFoundError: no appointment with this id
        """
        repo = AppointmentRepository(db)
        appointment = await repo.get_by_id(appointment_id)
        if appointment is None:
            raise NotFoundError(resource="appointment", resource_id=appointment_id)

        await repo.remove(appointment)
        await repo.save()
        logger.info("Appointment %s deleted", appointment_id)

    async def get_first_appointment(self, db: AsyncSession) -> AppointmentResponse:
        """One arbitrary appointment with customer and employee populated."""
        appointment = await AppointmentRepository(db).first_with_customer_and_employee()
        if appointment is None:
            raise NotFoundError(resource="appointment")
        return AppointmentResponse.model_validate(appointment)

    # ── Helpers ───────────────────────────────────────────────────────────

    async def _resolve_references(
        self,
        db: AsyncSession,
        payload: AppointmentRequest,
    ) -> Tuple[Customer, Employee, Service]:
        """
        Load the customer, employee and service a payload points at.

        Raises:
            ValidationError: listing every reference that does not exist
        """
        customer: Optional[Customer] = await CustomerRepository(db).get_by_id(payload.customer_id)
        employee: Optional[Employee] = await EmployeeRepository(db).get_by_id(payload.employee_id)
        service: Optional[Service] = await ServiceRepository(db).get_by_id(payload.service_id)

        missing = []
        if customer is None:
            missing.append(f"Customer with ID '{payload.customer_id}' was not found")
        if employee is None:
            missing.append(f"Employee with ID '{payload.employee_id}' was not found")
        if service is None:
            missing.append(f"Service with ID '{payload.service_id}' was not found")
        if missing:
            raise ValidationError(
                message="Appointment references records that do not exist",
                error_messages=missing,
            )
        return customer, employee, service

    async def _save_slot(self, repo: AppointmentRepository, payload: AppointmentRequest) -> None:
        """
        save(), reporting a rejection by the slot's unique index as a taken
        slot. Other conflicts (a reference deleted meanwhile) pass through.
        """
        try:
            await repo.save()
        except ConflictError as e:
            if SLOT_COLUMN not in e.context.get("detail", ""):
                raise
            raise ConflictError(
                SLOT_TAKEN_MESSAGE,
                context={
                    "appointment_datetime": payload.appointment_datetime.isoformat(),
                    **e.context,
                },
            ) from e


# ── Singleton Instance ────────────────────────────────────────────────────
appointment_service = AppointmentService()
