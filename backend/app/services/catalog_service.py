"""
Clinic Booking API — Catalog Service
======================================

What:  CRUD workflow for the treatment catalogue (`Service` rows).
       Treatment names are unique at create time.
"""

import logging
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import ConflictError, NotFoundError
from app.models.service import Service
from app.repositories import ServiceRepository
from app.schemas.service import ServiceRequest, ServiceResponse

logger = logging.getLogger(__name__)


class CatalogService:

    async def list_services(self, db: AsyncSession) -> List[ServiceResponse]:
        services = await ServiceRepository(db).list()
        return [ServiceResponse.model_validate(s) for s in services]

    async def get_service(self, db: AsyncSession, service_id: int) -> ServiceResponse:
        service = await ServiceRepository(db).get_by_id(service_id)
        if service is None:
            raise NotFoundError(resource="service", resource_id=service_id)
        return ServiceResponse.model_validate(service)

    async def create_service(self, db: AsyncSession, payload: ServiceRequest) -> ServiceResponse:
        repo = ServiceRepository(db)
        if await repo.get_by_name(payload.name) is not None:
            logger.warning("Duplicate service name rejected: %s", payload.name)
            raise ConflictError("Service already exists", context={"field": "name"})

        service = Service(**payload.model_dump())
        repo.create(service)
        await repo.save()

        logger.info("Service %s created (%s)", service.id, service.name)
        return ServiceResponse.model_validate(service)

    async def update_service(
        self,
        db: AsyncSession,
        service_id: int,
        payload: ServiceRequest,
    ) -> ServiceResponse:
        repo = ServiceRepository(db)
        service = await repo.get_by_id(service_id)
        if service is None:
            raise NotFoundError(resource="service", resource_id=service_id)

        for field, value in payload.model_dump().items():
            setattr(service, field, value)
        await repo.update(service)
        await repo.save()

        logger.info("Service %s updated", service_id)
        return ServiceResponse.model_validate(service)

    async def delete_service(self, db: AsyncSession, service_id: int) -> None:
        repo = ServiceRepository(db)
        service = await repo.get_by_id(service_id)
        if service is None:
            raise NotFoundError(resource="service", resource_id=service_id)

        await repo.remove(service)
        try:
            await repo.save()
        except ConflictError as e:
            raise ConflictError("Service has appointments and cannot be deleted", context=e.context) from e
        logger.info("Service %s deleted", service_id)


catalog_service = CatalogService()
