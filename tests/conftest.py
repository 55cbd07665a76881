"""Shared test fixtures and utilities for all tests.

Tests run against a throwaway SQLite database (aiosqlite) by default.
Set TEST_DATABASE_BACKEND=postgres to run the same suite against PostgreSQL
in a testcontainers-managed Docker container.
"""
import asyncio
import os
from contextlib import asynccontextmanager

import pytest
import pytest_asyncio
from dependency_injector import providers
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from src.app.config import Settings, UISettings
from src.app.containers import Container, WIRED_MODULES
from src.app.main import create_app
from src.client import AdminClient
from src.shared.database.database import Database, Base, DatabaseSettings
from src.shared.database.unit_of_work import UnitOfWork

TEST_BASE_URL = "http://test"
ALLOWED_TEST_ORIGIN = "https://allowed.example"


def _database_backend() -> str:
    return os.environ.get("TEST_DATABASE_BACKEND", "sqlite").lower()


@pytest.fixture(scope="module")
def postgres_container():
    """Start a PostgreSQL container for testing. Module-scoped for reuse."""
    from testcontainers.postgres import PostgresContainer

    with PostgresContainer("postgres:16-alpine") as postgres:
        yield postgres


@pytest.fixture(scope="module")
def async_db_url(request, tmp_path_factory):
    """
    Async database URL for the selected backend.
    Module-scoped so it can be reused across tests.
    """
    if _database_backend() == "postgres":
        postgres = request.getfixturevalue("postgres_container")
        connection_url = postgres.get_connection_url()
        return connection_url.replace("postgresql+psycopg2://", "postgresql+asyncpg://")

    db_file = tmp_path_factory.mktemp("db") / "clientes_test.sqlite3"
    return f"sqlite+aiosqlite:///{db_file}"


@pytest.fixture(scope="module")
def test_settings(async_db_url) -> Settings:
    """
    Centralized settings for all test configurations.

    Built explicitly instead of through environment variables so a developer's
    .env never leaks into the suite.
    """
    return Settings(
        database_url=async_db_url,
        allowed_origins=ALLOWED_TEST_ORIGIN,
        create_schema_on_startup=False,
        environment="test",
        ui=UISettings(api_base_url=TEST_BASE_URL),
        _env_file=None,
    )


async def wait_till_db_ready(db: Database, max_attempts: int = 20):
    """
    Wait for database to be ready.

    Raises:
        Exception: If database is not ready after max_attempts
    """
    for attempt in range(max_attempts):
        try:
            async with db._engine.begin():
                return
        except Exception:
            await asyncio.sleep(0.2)
    raise Exception(f"Database not ready after {max_attempts} attempts")


@pytest_asyncio.fixture(scope="function")
async def db(async_db_url):
    """
    Create database instance with test database.
    Function-scoped for test isolation.
    """
    db = Database(DatabaseSettings(db_url=async_db_url))
    await wait_till_db_ready(db)
    yield db
    await db.dispose()


@pytest_asyncio.fixture(scope="function")
async def clean_database(db):
    """
    Clean the database before each test.
    Drops and recreates all tables.
    """
    async with db._engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    yield db


@pytest.fixture(scope="function")
def test_container(test_settings, clean_database):
    """
    Create a test container with settings and database overrides.
    Function-scoped to ensure each test gets a fresh container.
    """
    container = Container()
    container.config.override(providers.Object(test_settings))
    container.database.override(providers.Object(clean_database))

    container.wire(modules=WIRED_MODULES)
    yield container
    container.config.reset_override()
    container.database.reset_override()
    container.unwire()


@asynccontextmanager
async def _test_lifespan(app: FastAPI):
    # Database tables are already created by clean_database fixture
    yield


@pytest.fixture(scope="function")
def test_app(test_container) -> FastAPI:
    """
    Create test application with container.
    Function-scoped for test isolation.
    """
    return create_app(test_container, lifespan=_test_lifespan)


@pytest_asyncio.fixture
async def http_client(test_app, test_container):
    """
    Raw HTTP client bound to the test app.

    The admin UI's API client is pointed at the same transport, so UI requests
    reach the API in-process.
    """
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url=TEST_BASE_URL) as client:
        test_container.admin_client.override(
            providers.Factory(AdminClient, base_url=TEST_BASE_URL, client=client)
        )
        yield client
        test_container.admin_client.reset_override()


@pytest_asyncio.fixture
async def admin_client(http_client):
    """Typed API client for testing."""
    client = AdminClient(base_url=TEST_BASE_URL, client=http_client)
    async with client:
        yield client


@pytest_asyncio.fixture(scope="function")
async def unit_of_work(clean_database, test_container):
    """
    Fixture for a UnitOfWork instance with a clean database.
    Uses the container's entity_mapper singleton.
    """
    entity_mapper = test_container.entity_mapper()
    yield UnitOfWork(clean_database, entity_mapper)


# =========================================================================
# Common repository and service fixtures (available to all test directories)
# =========================================================================

@pytest.fixture
def client_repository(test_container):
    """Get client repository from container."""
    return test_container.client_repository()


@pytest.fixture
def service_repository(test_container):
    """Get service repository from container."""
    return test_container.service_repository()


@pytest.fixture
def client_service(test_container):
    """Get client service from container."""
    return test_container.client_service()


@pytest.fixture
def service_catalog_service(test_container):
    """Get service catalog service from container."""
    return test_container.service_catalog_service()
