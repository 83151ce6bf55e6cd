"""
Clinic Booking API — Employee SQLAlchemy Model
================================================

What:  ORM model representing the `employees` table.

Uniqueness:
    An employee is identified by first + last name; the composite unique
    constraint `uq_employees_name` backs the duplicate check done at create.
"""

from typing import TYPE_CHECKING, List

from sqlalchemy import Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base

if TYPE_CHECKING:
    from app.models.appointment import Appointment


class Employee(Base):
    """A clinic employee who performs appointments."""

    __tablename__ = "employees"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    email: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    phone_number: Mapped[str] = mapped_column(String(50), nullable=False, default="")

    appointments: Mapped[List["Appointment"]] = relationship(back_populates="employee")

    __table_args__ = (
        UniqueConstraint("first_name", "last_name", name="uq_employees_name"),
    )

    def __repr__(self) -> str:
        return f"<Employee(id={self.id}, name='{self.first_name} {self.last_name}')>"
