"""
Clinic Booking API — Authentication Service
=============================================

What:  Verifies login credentials against the users table and issues
       bearer tokens; provisions the bootstrap account at startup.

Credential flow (POST /api/auth/token):
    username ──▶ UserRepository.get_by_username ──▶ verify_password(hash)
                        │ missing                        │ mismatch
                        ▼                                ▼
                AuthenticationError (401)       AuthenticationError (401)

    Both failure paths produce the same message so a caller cannot probe
    which usernames exist.
"""

import logging
from typing import Any, Dict

from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.exceptions import AuthenticationError, ConflictError
from app.models.user import User
from app.repositories import UserRepository
from app.schemas.auth import TokenRequest
from app.security import create_access_token, hash_password, verify_password

logger = logging.getLogger(__name__)


class AuthService:

    async def authenticate(self, db: AsyncSession, username: str, password: str) -> User:
        """
        Raises:
            AuthenticationError: unknown username or wrong password
        """
        user = await UserRepository(db).get_by_username(username)
        if user is None or not verify_password(password, user.password_hash):
            logger.warning("Failed login attempt for username=%s", username)
            raise AuthenticationError("Invalid username or password")
        return user

    async def issue_token(self, db: AsyncSession, credentials: TokenRequest) -> str:
        user = await self.authenticate(db, credentials.username, credentials.password)
        logger.info("Issued token for %s", user.username)
        return create_access_token(subject=user.username, user_id=str(user.id))

    def refresh_token(self, claims: Dict[str, Any]) -> str:
        """New token for the subject of an already-verified token."""
        return create_access_token(subject=claims["sub"], user_id=str(claims.get("id", "")))

    async def register_user(self, db: AsyncSession, username: str, password: str) -> User:
        """
        Create a login account; only the password hash is stored.

        Raises:
            ConflictError: the username is taken
        """
        repo = UserRepository(db)
        if await repo.get_by_username(username) is not None:
            raise ConflictError("User already exists", context={"field": "username"})

        user = User(username=username, password_hash=hash_password(password))
        repo.create(user)
        await repo.save()
        logger.info("User %s registered", username)
        return user

    async def ensure_admin_user(self, db: AsyncSession) -> None:
        """
        Provision ADMIN_USERNAME / ADMIN_PASSWORD if configured and missing.
        When: startup (lifespan). Existing accounts are left untouched.
        """
        if not settings.admin_username or not settings.admin_password:
            return
        if await UserRepository(db).get_by_username(settings.admin_username) is not None:
            return
        await self.register_user(db, settings.admin_username, settings.admin_password)


auth_service = AuthService()
