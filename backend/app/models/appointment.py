"""
Clinic Booking API — Appointment SQLAlchemy Model
===================================================

What:  ORM model representing the `appointments` table.
Who:   Used by AppointmentRepository and AppointmentService.

Slot uniqueness:
    At most one appointment may exist per exact date-time across the whole
    clinic. The workflow checks this before inserting; the unique index
    `uq_appointments_datetime` settles the race between two concurrent
    bookings for the same slot (the loser gets a ConflictError from save()).

Query Patterns:
    - Find by slot:    WHERE appointment_datetime = :dt  (unique index)
    - Page listing:    ORDER BY id LIMIT :size OFFSET :offset
    - Detail:          WHERE id = :id, customer/employee/service eager-loaded
"""

from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base

if TYPE_CHECKING:
    from app.models.customer import Customer
    from app.models.employee import Employee
    from app.models.service import Service


class Appointment(Base):
    """
    A booked treatment: one customer, one employee, one service, one slot.

    Status and notes are free text ("Booked", "Completed", "Cancelled", ...);
    no state machine is enforced.
    """

    __tablename__ = "appointments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # ── References ────────────────────────────────────────────────────────
    customer_id: Mapped[int] = mapped_column(ForeignKey("customers.id"), nullable=False, index=True)
    employee_id: Mapped[int] = mapped_column(ForeignKey("employees.id"), nullable=False, index=True)
    service_id: Mapped[int] = mapped_column(ForeignKey("services.id"), nullable=False, index=True)

    # ── Slot ──────────────────────────────────────────────────────────────
    appointment_datetime: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        unique=True,
        comment="Booked slot; unique across all appointments",
    )

    status: Mapped[str] = mapped_column(String(50), nullable=False, default="")
    notes: Mapped[str] = mapped_column(Text, nullable=False, default="")

    customer: Mapped[Optional["Customer"]] = relationship(back_populates="appointments")
    employee: Mapped[Optional["Employee"]] = relationship(back_populates="appointments")
    service: Mapped[Optional["Service"]] = relationship(back_populates="appointments")

    def __repr__(self) -> str:
        return (
            f"<Appointment(id={self.id}, at='{self.appointment_datetime}', "
            f"status='{self.status}')>"
        )
