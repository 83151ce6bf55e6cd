"""
Clinic Booking API — Generic CRUD Repository
==============================================

What:  Uniform persistence operations parameterized over one ORM model.
How:   Wraps the request's AsyncSession. `create`, `update` and `remove`
       only stage changes; nothing is durable until `save()` commits.

Unit of Work:
    save() commits every change staged on the session since the previous
    save, as one transaction. On failure the whole batch is rolled back:
        IntegrityError (unique index, foreign key)  → ConflictError
        any other SQLAlchemyError                   → DatabaseError
"""

import logging
from typing import Any, Generic, List, Optional, Type, TypeVar

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import Base
from app.exceptions import ConflictError, DatabaseError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class CRUDRepository(Generic[ModelT]):
    """
    Base repository for a single model.

    Subclasses set `model` and add typed lookups:

        class ServiceRepository(CRUDRepository[Service]):
            model = Service
    """

    model: Type[ModelT]

    def __init__(self, session: AsyncSession):
        self.session = session

    # ── Reads ─────────────────────────────────────────────────────────────

    async def list(self) -> List[ModelT]:
        """All rows in storage (primary key) order. No pagination at this layer."""
        result = await self.session.execute(select(self.model).order_by(self.model.id))
        return list(result.scalars().all())

    async def get_by_id(self, entity_id: Any) -> Optional[ModelT]:
        return await self.session.get(self.model, entity_id)

    async def count(self) -> int:
        result = await self.session.execute(select(func.count()).select_from(self.model))
        return result.scalar() or 0

    # ── Staged writes ─────────────────────────────────────────────────────

    def create(self, entity: ModelT) -> ModelT:
        """Stage a new row."""
        self.session.add(entity)
        return entity

    async def update(self, entity: ModelT) -> ModelT:
        """
        Stage a full-record overwrite keyed by primary key.

        A row already tracked by the session carries its changes itself and
        is returned as-is. Detached rows are merged with autoflush off, so a
        pending change that breaks a constraint surfaces at save(), never here.
        """
        if entity in self.session:
            return entity
        try:
            with self.session.no_autoflush:
                return await self.session.merge(entity)
        except SQLAlchemyError as e:
            raise await self._store_failure(e) from e

    async def remove(self, entity: ModelT) -> None:
        """Stage a deletion."""
        await self.session.delete(entity)

    # ── Commit ────────────────────────────────────────────────────────────

    async def save(self) -> None:
        """
        Commit all staged operations atomically.

        Raises:
            ConflictError: the store rejected the batch on a constraint;
                           `context["detail"]` holds the driver message
            DatabaseError: any other store failure
        """
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            raise await self._store_failure(e) from e

    async def _store_failure(self, e: SQLAlchemyError) -> Exception:
        """Roll back the batch and map the store error onto the API hierarchy."""
        await self.session.rollback()
        if isinstance(e, IntegrityError):
            logger.warning("Integrity violation saving %s: %s", self.model.__name__, e.orig)
            return ConflictError(
                context={
                    "model": self.model.__name__,
                    "error_type": type(e.orig).__name__,
                    "detail": str(e.orig),
                },
            )
        logger.error("Database error saving %s: %s", self.model.__name__, str(e), exc_info=True)
        return DatabaseError(
            context={"model": self.model.__name__, "error_type": type(e).__name__},
        )
