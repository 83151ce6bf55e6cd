"""
Clinic Booking API — User SQLAlchemy Model
============================================

What:  ORM model representing the `users` table (API login accounts).

Security:
    Only a passlib hash of the password is stored (`password_hash`).
    Plaintext passwords never reach the database or the logs.
"""

import uuid

from sqlalchemy import String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class User(Base):
    """An account that can obtain bearer tokens from /api/auth/token."""

    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    username: Mapped[str] = mapped_column(String(150), nullable=False, unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username='{self.username}')>"
