"""
Clinic Booking API — Token and Password Security
==================================================

What:  Password hashing, bearer token issuance/verification, and the FastAPI
       dependency that guards protected routes.
How:   passlib CryptContext (bcrypt) for password hashes; python-jose for
       HS256 JWTs carrying issuer, audience and expiry.
Who:   AuthService issues tokens; routes declare `Depends(require_token)`.

Token claims:
    sub    username
    email  username (clients read the login name from this claim)
    id     user id
    jti    unique token id
    iss    settings.jwt_issuer
    aud    settings.jwt_audience
    exp    now + settings.access_token_expire_minutes
"""

import logging
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext

from app.config import settings
from app.exceptions import AuthenticationError

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# auto_error=False: a missing header reaches require_token, which answers
# with the 401 envelope instead of FastAPI's bare 403
bearer_scheme = HTTPBearer(auto_error=False)


# ── Passwords ─────────────────────────────────────────────────────────────

def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, password_hash: str) -> bool:
    """Constant-time comparison against a stored hash. Malformed hashes never match."""
    try:
        return pwd_context.verify(plain_password, password_hash)
    except (ValueError, TypeError) as e:
        logger.error("Password verification error: %s", e)
        return False


# ── Tokens ────────────────────────────────────────────────────────────────

def create_access_token(
    subject: str,
    user_id: str,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """Sign a bearer token for `subject`."""
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    claims = {
        "sub": subject,
        "email": subject,
        "id": user_id,
        "jti": uuid.uuid4().hex,
        "iss": settings.jwt_issuer,
        "aud": settings.jwt_audience,
        "exp": expire,
    }
    return jwt.encode(claims, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> Dict[str, Any]:
    """
    Verify signature, issuer, audience and expiry.

    Raises:
        AuthenticationError: on any verification failure
    """
    try:
        return jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience,
            issuer=settings.jwt_issuer,
        )
    except ExpiredSignatureError:
        raise AuthenticationError("Token has expired")
    except JWTError as e:
        logger.warning("JWT verification failed: %s", e)
        raise AuthenticationError("Invalid token")


# ── Route Dependency ──────────────────────────────────────────────────────

async def require_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Dict[str, Any]:
    """
    Guard for protected routes. Returns the verified token claims.

    Usage:
        @router.get("/api/appointment", dependencies=[Depends(require_token)])
    """
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise AuthenticationError("Not authenticated. Provide a Bearer token in the Authorization header.")
    return decode_access_token(credentials.credentials)
