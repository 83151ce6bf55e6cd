"""
Clinic Booking API — Customer SQLAlchemy Model
================================================

What:  ORM model representing the `customers` table.
Who:   Used by CustomerRepository and as the `customer` association of
       an Appointment.

Table Design:
    - email carries a unique index: it is the natural lookup key and the
      store enforces "one customer per email" even under concurrent creates
    - date_of_birth is a DATE (no time component)
"""

from datetime import date
from typing import TYPE_CHECKING, List

from sqlalchemy import Date, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base

if TYPE_CHECKING:
    from app.models.appointment import Appointment


class Customer(Base):
    """A clinic customer. Owns zero or more appointments (back-reference only)."""

    __tablename__ = "customers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    last_name: Mapped[str] = mapped_column(String(100), nullable=False, default="")

    # ── Natural key ───────────────────────────────────────────────────────
    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        comment="Unique customer email, used for duplicate detection",
    )

    phone_number: Mapped[str] = mapped_column(String(50), nullable=False, default="")
    address: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    date_of_birth: Mapped[date | None] = mapped_column(Date, nullable=True)

    appointments: Mapped[List["Appointment"]] = relationship(back_populates="customer")

    def __repr__(self) -> str:
        return f"<Customer(id={self.id}, email='{self.email}')>"
