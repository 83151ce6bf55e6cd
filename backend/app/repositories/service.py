"""Service (treatment catalogue) data access."""

from typing import Optional

from sqlalchemy import select

from app.models.service import Service
from app.repositories.base import CRUDRepository


class ServiceRepository(CRUDRepository[Service]):
    model = Service

    async def get_by_name(self, name: str) -> Optional[Service]:
        result = await self.session.execute(select(Service).where(Service.name == name))
        return result.scalar_one_or_none()
