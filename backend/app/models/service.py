"""
Clinic Booking API — Service SQLAlchemy Model
===============================================

What:  ORM model representing the `services` table (treatments the clinic
       offers, e.g. "Hydrafacial", 60 minutes, 120.00).

Column notes:
    - name: unique index, the natural lookup key
    - duration: whole minutes
    - price: NUMERIC(10, 2), surfaced in Python as Decimal
"""

from decimal import Decimal
from typing import TYPE_CHECKING, List

from sqlalchemy import Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base

if TYPE_CHECKING:
    from app.models.appointment import Appointment


class Service(Base):
    """A bookable treatment."""

    __tablename__ = "services"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(150), nullable=False, unique=True, index=True)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    duration: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        comment="Treatment length in minutes",
    )
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False, default=Decimal("0"))

    appointments: Mapped[List["Appointment"]] = relationship(back_populates="service")

    def __repr__(self) -> str:
        return f"<Service(id={self.id}, name='{self.name}')>"
