"""
Service (treatment) request/response schemas.

Prices travel as JSON numbers; internally they stay Decimal end to end.
"""

from decimal import Decimal
from typing import Annotated

from pydantic import Field, PlainSerializer

from app.schemas.common import CamelModel

Price = Annotated[
    Decimal,
    PlainSerializer(float, return_type=float, when_used="json"),
]


class ServiceRequest(CamelModel):
    """Body of POST /api/service and PUT /api/service?id= (full overwrite)."""

    name: str = Field(min_length=1, max_length=150, description="Unique treatment name")
    description: str = Field(default="")
    duration: int = Field(default=0, ge=0, description="Length in minutes")
    price: Price = Field(default=Decimal("0"), ge=0, max_digits=10, decimal_places=2)


class ServiceResponse(CamelModel):
    id: int
    name: str
    description: str
    duration: int
    price: Price
