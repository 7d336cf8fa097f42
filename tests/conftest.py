"""
Pytest configuration and fixtures for FoodShare tests.
"""

import sys
from pathlib import Path
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from foodshare.api.main import create_app
from foodshare.api.dependencies import Settings, ServiceContainer
from foodshare.storage.database import Database
from tests.fakes import FakePaymentClient, FakeScoringClient


# =============================================================================
# Test Settings
# =============================================================================

@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """Return settings configured for testing."""
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'foodshare_test.db'}",
        database_echo=False,
        llm_provider="mock",
        static_dir=str(tmp_path / "public"),
        environment="test",
        debug=False,
    )


# =============================================================================
# Collaborator Fixtures
# =============================================================================

@pytest.fixture
def scoring_oracle() -> FakeScoringClient:
    """Fake oracle; tests fill in ``responses``."""
    return FakeScoringClient()


@pytest.fixture
def payment_client() -> FakePaymentClient:
    return FakePaymentClient()


# =============================================================================
# Database Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def database(test_settings) -> AsyncGenerator[Database, None]:
    """Temp-file SQLite database with tables created."""
    db = Database(test_settings.database_url)
    await db.create_tables()

    yield db

    await db.dispose()


@pytest.fixture
def seed(database):
    """Insert rows directly, for tables the API cannot write."""

    async def _seed(foods=(), recipients=()):
        for food in foods:
            await database.execute(
                "INSERT INTO foods (name, quantity, urgency) "
                "VALUES (:name, :quantity, :urgency)",
                {
                    "name": food["name"],
                    "quantity": food.get("quantity"),
                    "urgency": food.get("urgency"),
                },
            )
        for recipient in recipients:
            await database.execute(
                "INSERT INTO recipients (name, email, phone, address, capacity) "
                "VALUES (:name, :email, :phone, :address, :capacity)",
                {
                    "name": recipient["name"],
                    "email": recipient.get("email", "contact@example.org"),
                    "phone": recipient.get("phone", "254700000000"),
                    "address": recipient.get("address", "Nairobi"),
                    "capacity": recipient.get("capacity"),
                },
            )

    return _seed


# =============================================================================
# Application Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def services(
    test_settings,
    database,
    scoring_oracle,
    payment_client,
) -> AsyncGenerator[ServiceContainer, None]:
    """Service container wired with fakes."""
    container = ServiceContainer(
        test_settings,
        database=database,
        oracle=scoring_oracle,
        payments=payment_client,
    )
    await container.startup()

    yield container


@pytest_asyncio.fixture
async def app(test_settings, services):
    """Create FastAPI application for testing."""
    application = create_app(test_settings)

    # ASGITransport skips the lifespan, so install the container directly
    application.state.services = services

    yield application


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """Provide async HTTP client for API tests."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


# =============================================================================
# Data Fixtures
# =============================================================================

@pytest.fixture
def sample_user() -> dict:
    return {
        "username": "amina",
        "email": "amina@example.com",
        "password": "correct horse battery",
    }


@pytest.fixture
def sample_recipient() -> dict:
    return {
        "name": "Kibera Community Kitchen",
        "email": "kitchen@example.org",
        "phone": "254712345678",
        "address": "Kibera, Nairobi",
    }


@pytest.fixture
def sample_foods() -> list[dict]:
    return [
        {"name": "Bread", "quantity": 40, "urgency": "high"},
        {"name": "Rice", "quantity": 25, "urgency": "low"},
    ]


@pytest.fixture
def sample_recipients() -> list[dict]:
    return [
        {"name": "Shelter A", "address": "Westlands", "capacity": 50},
        {"name": "Shelter B", "address": "Kibera", "capacity": 120},
        {"name": "Shelter C", "address": "Embakasi"},
    ]
