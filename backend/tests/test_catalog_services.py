"""
Clinic Booking API — Customer, Employee and Service CRUD Tests
================================================================

What:  Uniqueness rules and not-found handling for the reference records
       appointments point at.
"""

from decimal import Decimal

import pytest

from app.exceptions import ConflictError, NotFoundError
from app.schemas.customer import CustomerRequest
from app.schemas.employee import EmployeeRequest
from app.schemas.service import ServiceRequest
from app.services.catalog_service import CatalogService
from app.services.customer_service import CustomerService
from app.services.employee_service import EmployeeService


def customer_request(email: str, first_name: str = "Ana") -> CustomerRequest:
    return CustomerRequest(first_name=first_name, last_name="Silva", email=email)


class TestCustomerService:

    def setup_method(self):
        self.service = CustomerService()

    @pytest.mark.asyncio
    async def test_list_returns_every_customer(self, db_session):
        for i in range(3):
            await self.service.create_customer(db_session, customer_request(f"c{i}@example.com"))

        customers = await self.service.list_customers(db_session)

        assert [c.email for c in customers] == [
            "c0@example.com",
            "c1@example.com",
            "c2@example.com",
        ]

    @pytest.mark.asyncio
    async def test_duplicate_email_rejected(self, db_session):
        await self.service.create_customer(db_session, customer_request("ana@example.com"))

        with pytest.raises(ConflictError) as exc_info:
            await self.service.create_customer(
                db_session, customer_request("ana@example.com", first_name="Other")
            )

        assert exc_info.value.message == "Customer already exists"
        assert len(await self.service.list_customers(db_session)) == 1

    @pytest.mark.asyncio
    async def test_update_to_taken_email_rejected_by_store(self, db_session):
        await self.service.create_customer(db_session, customer_request("ana@example.com"))
        bea = await self.service.create_customer(db_session, customer_request("bea@example.com"))

        with pytest.raises(ConflictError):
            await self.service.update_customer(
                db_session, bea.id, customer_request("ana@example.com")
            )

    @pytest.mark.asyncio
    async def test_update_overwrites_fields(self, db_session):
        created = await self.service.create_customer(db_session, customer_request("ana@example.com"))

        updated = await self.service.update_customer(
            db_session,
            created.id,
            CustomerRequest(first_name="Ana", last_name="Sousa", email="ana@example.com", address="Porto"),
        )

        assert updated.last_name == "Sousa"
        assert updated.address == "Porto"

    @pytest.mark.asyncio
    async def test_delete_customer_with_appointments_rejected(self, db_session, clinic):
        from app.schemas.appointment import AppointmentRequest
        from app.services.appointment_service import appointment_service
        from datetime import datetime

        await appointment_service.create_appointment(
            db_session,
            AppointmentRequest(
                customer_id=clinic.customer.id,
                employee_id=clinic.employee.id,
                service_id=clinic.service.id,
                appointment_datetime=datetime(2025, 3, 1, 9, 0),
                status="Scheduled",
            ),
        )

        with pytest.raises(ConflictError) as exc_info:
            await self.service.delete_customer(db_session, clinic.customer.id)

        assert exc_info.value.message == "Customer has appointments and cannot be deleted"

    @pytest.mark.asyncio
    async def test_get_missing_customer(self, mock_db_session):
        mock_db_session.get.return_value = None

        with pytest.raises(NotFoundError) as exc_info:
            await self.service.get_customer(mock_db_session, 12)

        assert exc_info.value.status_code == 404
        mock_db_session.commit.assert_not_awaited()


class TestEmployeeService:

    def setup_method(self):
        self.service = EmployeeService()

    @pytest.mark.asyncio
    async def test_duplicate_full_name_rejected(self, db_session):
        await self.service.create_employee(
            db_session, EmployeeRequest(first_name="Marta", last_name="Costa")
        )

        with pytest.raises(ConflictError) as exc_info:
            await self.service.create_employee(
                db_session, EmployeeRequest(first_name="Marta", last_name="Costa")
            )
        assert exc_info.value.message == "Employee already exists"

    @pytest.mark.asyncio
    async def test_same_first_name_different_last_name_allowed(self, db_session):
        await self.service.create_employee(
            db_session, EmployeeRequest(first_name="Marta", last_name="Costa")
        )
        await self.service.create_employee(
            db_session, EmployeeRequest(first_name="Marta", last_name="Reis")
        )

        assert len(await self.service.list_employees(db_session)) == 2

    @pytest.mark.asyncio
    async def test_update_to_taken_name_rejected_by_store(self, db_session):
        await self.service.create_employee(
            db_session, EmployeeRequest(first_name="Marta", last_name="Costa")
        )
        reis = await self.service.create_employee(
            db_session, EmployeeRequest(first_name="Marta", last_name="Reis")
        )

        with pytest.raises(ConflictError):
            await self.service.update_employee(
                db_session, reis.id, EmployeeRequest(first_name="Marta", last_name="Costa")
            )

        names = sorted(e.last_name for e in await self.service.list_employees(db_session))
        assert names == ["Costa", "Reis"]

    @pytest.mark.asyncio
    async def test_delete_missing_employee(self, db_session):
        with pytest.raises(NotFoundError):
            await self.service.delete_employee(db_session, 3)


class TestCatalogService:

    def setup_method(self):
        self.service = CatalogService()

    @pytest.mark.asyncio
    async def test_create_and_get(self, db_session):
        created = await self.service.create_service(
            db_session,
            ServiceRequest(name="Peeling", duration=45, price=Decimal("60.50")),
        )

        fetched = await self.service.get_service(db_session, created.id)

        assert fetched.name == "Peeling"
        assert fetched.duration == 45
        assert fetched.price == Decimal("60.50")

    @pytest.mark.asyncio
    async def test_duplicate_name_rejected(self, db_session):
        await self.service.create_service(db_session, ServiceRequest(name="Peeling"))

        with pytest.raises(ConflictError) as exc_info:
            await self.service.create_service(db_session, ServiceRequest(name="Peeling"))
        assert exc_info.value.message == "Service already exists"

    @pytest.mark.asyncio
    async def test_delete_then_get(self, db_session):
        created = await self.service.create_service(db_session, ServiceRequest(name="Massage"))

        await self.service.delete_service(db_session, created.id)

        with pytest.raises(NotFoundError):
            await self.service.get_service(db_session, created.id)
