"""Authentication schemas."""

from pydantic import Field

from app.schemas.common import CamelModel


class TokenRequest(CamelModel):
    """Body of POST /api/auth/token."""

    username: str = Field(min_length=1, max_length=150)
    password: str = Field(min_length=1, max_length=128)
