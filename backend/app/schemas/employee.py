"""Employee request/response schemas."""

from pydantic import Field

from app.schemas.common import CamelModel


class EmployeeRequest(CamelModel):
    """Body of POST /api/employee and PUT /api/employee?id= (full overwrite)."""

    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(default="", max_length=100)
    email: str = Field(default="", max_length=255)
    phone_number: str = Field(default="", max_length=50)


class EmployeeResponse(CamelModel):
    id: int
    first_name: str
    last_name: str
    email: str
    phone_number: str
