"""
Clinic Booking API — Test Configuration (conftest.py)
=======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Environment variables are set before any `app` import so Settings
       picks up the in-memory SQLite database and a test signing key.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── db_engine:        in-memory SQLite engine with every table created
    ├── db_session:       AsyncSession bound to db_engine
    ├── mock_db_session:  AsyncMock session for pure unit tests
    ├── clinic:           one customer, employee and service already saved
    ├── test_client:      HTTPX AsyncClient whose requests share db_session
    └── auth_headers:     Authorization header for a freshly registered user
"""

import os

os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["JWT_SECRET_KEY"] = "test-signing-key-not-for-production"
os.environ["ADMIN_USERNAME"] = ""
os.environ["ADMIN_PASSWORD"] = ""
os.environ["LOG_LEVEL"] = "WARNING"

from datetime import date
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import app.models  # noqa: F401
from app.database import Base, get_db_session
from app.models.customer import Customer
from app.models.employee import Employee
from app.models.service import Service


# ══════════════════════════════════════════════════════════════════════════
# Database Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_engine():
    """
    A private in-memory database per test.

    StaticPool keeps a single connection open, so every session created on
    this engine sees the same in-memory database.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_engine):
    factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_get_customer(mock_db_session):
            mock_db_session.get.return_value = None
            with pytest.raises(NotFoundError):
                await customer_service.get_customer(mock_db_session, 1)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.get = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


# ══════════════════════════════════════════════════════════════════════════
# Sample Data
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def sample_customer_data():
    return {
        "firstName": "Ana",
        "lastName": "Silva",
        "email": "ana.silva@example.com",
        "phoneNumber": "+351 912 345 678",
        "address": "Rua das Flores 12, Lisboa",
        "dateOfBirth": "1990-05-17",
    }


@pytest_asyncio.fixture
async def clinic(db_session):
    """One customer, employee and service, saved. Their ids are all 1."""
    customer = Customer(
        first_name="Ana",
        last_name="Silva",
        email="ana.silva@example.com",
        phone_number="+351 912 345 678",
        address="Rua das Flores 12, Lisboa",
        date_of_birth=date(1990, 5, 17),
    )
    employee = Employee(first_name="Marta", last_name="Costa", email="marta@clinic.example")
    service = Service(
        name="Facial Cleansing",
        description="Deep cleansing facial",
        duration=60,
        price=Decimal("45.00"),
    )
    db_session.add_all([customer, employee, service])
    await db_session.commit()
    return SimpleNamespace(customer=customer, employee=employee, service=service)


# ══════════════════════════════════════════════════════════════════════════
# HTTP Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def test_client(db_session):
    """
    HTTPX AsyncClient talking to the FastAPI app in-process.

    The get_db_session dependency is overridden so requests and the test body
    share db_session. The lifespan does not run under ASGITransport.
    """
    from app.main import app

    async def override_get_db_session():
        yield db_session

    app.dependency_overrides[get_db_session] = override_get_db_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def auth_headers(db_session):
    from app.schemas.auth import TokenRequest
    from app.services.auth_service import auth_service

    await auth_service.register_user(db_session, "reception", "s3cret-pass")
    token = await auth_service.issue_token(
        db_session, TokenRequest(username="reception", password="s3cret-pass")
    )
    return {"Authorization": f"Bearer {token}"}
