"""
Clinic Booking API — Shared Schemas
=====================================

What:  The response envelope wrapped around every API response, the
       camelCase base model, and the health check payload.

Envelope shape (JSON):
    {
        "isSuccess": true,
        "message": "Appointment created successfully",
        "result": { ... } | [ ... ] | "token" | null,
        "statusCode": 201,
        "errorMessages": []
    }

Field names are camelCase on the wire. Requests accept either camelCase or
the Python field name (populate_by_name).
"""

from typing import Any, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

ResultT = TypeVar("ResultT")


class CamelModel(BaseModel):
    """Base for every API schema: camelCase aliases, ORM attribute reading."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class APIResponse(CamelModel, Generic[ResultT]):
    """
    Uniform success/failure wrapper.

    Routes build successes with `APIResponse.ok(...)`; the global exception
    handlers build failures with `APIResponse.failure(...)`.
    """

    is_success: bool = Field(default=False, description="True when the operation succeeded")
    message: str = Field(default="", description="Human-readable summary")
    result: Optional[ResultT] = Field(default=None, description="Operation payload, if any")
    status_code: int = Field(default=200, description="HTTP status of this response")
    error_messages: List[str] = Field(
        default_factory=list,
        description="One entry per failed rule (empty on success)",
    )

    @classmethod
    def ok(
        cls,
        result: Any = None,
        message: str = "",
        status_code: int = 200,
    ) -> "APIResponse":
        return cls(is_success=True, message=message, result=result, status_code=status_code)

    @classmethod
    def failure(
        cls,
        status_code: int,
        message: str,
        error_messages: Optional[List[str]] = None,
    ) -> "APIResponse":
        return cls(
            is_success=False,
            message=message,
            status_code=status_code,
            error_messages=error_messages if error_messages is not None else [message],
        )


class HealthResponse(CamelModel):
    """Returned by GET /health for container probes and monitoring."""

    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
