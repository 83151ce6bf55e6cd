"""Customer request/response schemas."""

from datetime import date
from typing import Optional

from pydantic import EmailStr, Field

from app.schemas.common import CamelModel


class CustomerRequest(CamelModel):
    """Body of POST /api/customer and PUT /api/customer/{id} (full overwrite)."""

    first_name: str = Field(default="", max_length=100)
    last_name: str = Field(default="", max_length=100)
    email: EmailStr = Field(description="Unique; used to detect duplicate customers")
    phone_number: str = Field(default="", max_length=50)
    address: str = Field(default="", max_length=255)
    date_of_birth: Optional[date] = None


class CustomerResponse(CamelModel):
    id: int
    first_name: str
    last_name: str
    email: str
    phone_number: str
    address: str
    date_of_birth: Optional[date] = None
