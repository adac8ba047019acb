"""Shared test fixtures and utilities for all tests."""
from contextlib import asynccontextmanager

import pytest
import pytest_asyncio
from dependency_injector import providers
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from src.app.containers import Container
from src.app.core.clock import FixedClock
from src.client import UsersClient
from src.shared.database.database import Database, Base, DatabaseSettings
from tests.factories import FROZEN_NOW


@pytest.fixture
def clock():
    return FixedClock(FROZEN_NOW)


@pytest_asyncio.fixture(scope="function")
async def db(tmp_path):
    """
    Create database instance backed by a throwaway SQLite file.
    Function-scoped for test isolation.
    """
    db_settings = DatabaseSettings(db_url=f"sqlite+aiosqlite:///{tmp_path / 'users.db'}")
    db = Database(db_settings)
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
def test_container(clean_database, clock):
    """
    Create a test container with database and clock overrides.
    Function-scoped to ensure each test gets a fresh container; create_app wires it.
    """
    container = Container()

    container.database.override(providers.Object(clean_database))
    container.clock.override(providers.Object(clock))

    yield container
    container.database.reset_override()
    container.clock.reset_override()
    container.unwire()


@pytest_asyncio.fixture(scope="function")
async def test_app(test_container):
    """
    Create test application with container.
    Function-scoped for test isolation.
    """
    from src.app.main import create_app

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Database tables are already created by clean_database fixture
        yield

    yield create_app(container=test_container, lifespan=lifespan)


@pytest_asyncio.fixture
async def users_client(test_app):
    """
    Create a Users client talking to the app in-process.
    test_app already depends on clean_database for test isolation.
    """
    transport = ASGITransport(app=test_app)
    http_client = AsyncClient(transport=transport, base_url="http://test")
    client = UsersClient(base_url="http://test", client=http_client)

    async with client:
        yield client
    await http_client.aclose()


# =========================================================================
# Common repository and service fixtures (available to all test directories)
# =========================================================================

@pytest.fixture
def user_repository(test_container):
    """Get user repository from container."""
    return test_container.user_repository()


@pytest.fixture
def user_service(test_container):
    """Get user service from container."""
    return test_container.user_service()
