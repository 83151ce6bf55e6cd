"""
Clinic Booking API — Authentication Route Handlers
====================================================

What:  Token issuance for API clients.

    POST /api/auth/token    {username, password} → envelope(result = bearer token)
    GET  /api/auth/refresh  (bearer) → envelope(result = fresh bearer token)
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.auth import TokenRequest
from app.schemas.common import APIResponse
from app.security import require_token
from app.services.auth_service import auth_service

router = APIRouter(prefix="/api/auth", tags=["Auth"])


@router.post(
    "/token",
    response_model=APIResponse[str],
    responses={401: {"description": "Invalid username or password", "model": APIResponse}},
    summary="Exchange credentials for a bearer token",
)
async def issue_token(
    credentials: TokenRequest,
    db: AsyncSession = Depends(get_db_session),
) -> APIResponse:
    token = await auth_service.issue_token(db, credentials)
    return APIResponse.ok(token, message="Token issued")


@router.get(
    "/refresh",
    response_model=APIResponse[str],
    responses={401: {"description": "Missing or invalid bearer token", "model": APIResponse}},
    summary="Exchange a valid token for a fresh one",
)
async def refresh_token(claims: Dict[str, Any] = Depends(require_token)) -> APIResponse:
    return APIResponse.ok(auth_service.refresh_token(claims), message="Token refreshed")
