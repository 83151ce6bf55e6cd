"""Customer data access."""

from typing import Optional

from sqlalchemy import select

from app.models.customer import Customer
from app.repositories.base import CRUDRepository


class CustomerRepository(CRUDRepository[Customer]):
    model = Customer

    async def get_by_email(self, email: str) -> Optional[Customer]:
        """Exact-match lookup on the unique email index."""
        result = await self.session.execute(
            select(Customer).where(Customer.email == email)
        )
        return result.scalar_one_or_none()
