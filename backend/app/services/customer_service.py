"""
Clinic Booking API — Customer Service
=======================================

What:  CRUD workflow for customers with duplicate-email detection.
Who:   Called by the /api/customer route handlers.

Uniqueness:
    Email is checked at create time only. An update that moves a customer
    onto another customer's email is not pre-checked; the unique index
    rejects it at save() with a ConflictError.
"""

import logging
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import ConflictError, NotFoundError
from app.models.customer import Customer
from app.repositories import CustomerRepository
from app.schemas.customer import CustomerRequest, CustomerResponse

logger = logging.getLogger(__name__)


class CustomerService:
    """Stateless; every call receives the request's session."""

    async def list_customers(self, db: AsyncSession) -> List[CustomerResponse]:
        customers = await CustomerRepository(db).list()
        return [CustomerResponse.model_validate(c) for c in customers]

    async def get_customer(self, db: AsyncSession, customer_id: int) -> CustomerResponse:
        customer = await CustomerRepository(db).get_by_id(customer_id)
        if customer is None:
            raise NotFoundError(resource="customer", resource_id=customer_id)
        return CustomerResponse.model_validate(customer)

    async def create_customer(self, db: AsyncSession, payload: CustomerRequest) -> CustomerResponse:
        """
        Raises:
            ConflictError: a customer with this email already exists
        """
        repo = CustomerRepository(db)
        if await repo.get_by_email(payload.email) is not None:
            logger.warning("Duplicate customer email rejected")
            raise ConflictError("Customer already exists", context={"field": "email"})

        customer = Customer(**payload.model_dump())
        repo.create(customer)
        await repo.save()

        logger.info("Customer %s created", customer.id)
        return CustomerResponse.model_validate(customer)

    async def update_customer(
        self,
        db: AsyncSession,
        customer_id: int,
        payload: CustomerRequest,
    ) -> CustomerResponse:
        repo = CustomerRepository(db)
        customer = await repo.get_by_id(customer_id)
        if customer is None:
            raise NotFoundError(resource="customer", resource_id=customer_id)

        for field, value in payload.model_dump().items():
            setattr(customer, field, value)
        await repo.update(customer)
        await repo.save()

        logger.info("Customer %s updated", customer_id)
        return CustomerResponse.model_validate(customer)

    async def delete_customer(self, db: AsyncSession, customer_id: int) -> None:
        """
        Raises:
            NotFoundError: no customer with this id
            ConflictError: the customer still has appointments
        """
        repo = CustomerRepository(db)
        customer = await repo.get_by_id(customer_id)
        if customer is None:
            raise NotFoundError(resource="customer", resource_id=customer_id)

        await repo.remove(customer)
        try:
            await repo.save()
        except ConflictError as e:
            raise ConflictError("Customer has appointments and cannot be deleted", context=e.context) from e
        logger.info("Customer %s deleted", customer_id)


customer_service = CustomerService()
