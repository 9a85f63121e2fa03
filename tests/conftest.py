"""Pytest configuration and fixtures."""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from voice_matrix.core.auth import create_access_token
from voice_matrix.domain.errors import DeploymentFailed
from voice_matrix.infrastructure.voice_platform.base import (
    DeploymentClientProtocol,
    DeploymentResult,
)
from voice_matrix.persistence.database import Base, get_db
from voice_matrix.persistence.models import *  # noqa: F401, F403

APPOINTMENT_TEMPLATE_ID = "appointment-booking-specialist-v1"


class FakeDeploymentClient(DeploymentClientProtocol):
    """In-memory deployment client recording every call."""

    provider = "fake"

    def __init__(self) -> None:
        self.deployed = []
        self.updated = []
        self.deleted = []
        self.fail_with: DeploymentFailed | None = None

    async def deploy(self, configuration):
        if self.fail_with is not None:
            raise self.fail_with
        self.deployed.append(configuration)
        return DeploymentResult(
            remote_id=f"remote-{len(self.deployed)}",
            provider=self.provider,
            assigned_phone_number="+15555550100",
        )

    async def update(self, remote_id, configuration):
        if self.fail_with is not None:
            raise self.fail_with
        self.updated.append((remote_id, configuration))
        return DeploymentResult(remote_id=remote_id, provider=self.provider)

    async def delete(self, remote_id):
        if self.fail_with is not None:
            raise self.fail_with
        self.deleted.append(remote_id)


@pytest.fixture
async def db_session():
    """Create a test database session."""
    # Use in-memory SQLite for testing
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with async_session() as session:
        yield session

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def fake_client():
    return FakeDeploymentClient()


@pytest.fixture
def appointment_values():
    """Valid values for every dynamic segment of the appointment booking template."""
    return {
        "business-name-services": "Premier Dental Care - cleanings and exams",
        "available-services": (
            "Routine cleaning (60 minutes), comprehensive exam with x-rays (90 minutes), "
            "teeth whitening consultation (30 minutes), emergency visit (45 minutes)."
        ),
        "business-hours-availability": (
            "Monday to Friday 8am to 6pm, Saturday 9am to 1pm. Same-day emergency slots at 8am."
        ),
        "booking-requirements": (
            "Full name, phone number, date of birth, insurance provider and reason for the visit."
        ),
        "pricing-policies": "Cleanings are $120 without insurance; payment due at visit.",
        "appointment-reminders": "Text reminder 24 hours before the appointment.",
    }


@pytest.fixture
def auth_headers():
    token = create_access_token({"sub": "user-1"})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
async def client(db_session, fake_client):
    """Create a test API client bound to the test database and fake platform."""
    from voice_matrix.api.deps import get_client_factory
    from voice_matrix.main import app

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_client_factory] = lambda: (lambda: fake_client)

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as test_client:
        yield test_client

    app.dependency_overrides.clear()
