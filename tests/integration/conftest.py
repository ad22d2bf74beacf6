from datetime import UTC, datetime

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from access_sentinel.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from access_sentinel.api.app import create_app
from access_sentinel.app.services.root_admin import RootAdminSettings
from access_sentinel.depends import (
    enable_sqlite_savepoints,
    get_clock,
    get_root_admin_settings,
    get_unit_of_work,
)
from config import ApplicationConfig
from tests.fixtures.factories import FixedClock

ROOT_EMAIL = "root@sentinel.example.com"
ROOT_PASSWORD = "RootPass123!"


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    enable_sqlite_savepoints(engine)
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest.fixture
def clock():
    # Monday 2025-03-10 12:00 UTC
    return FixedClock(datetime(2025, 3, 10, 12, 0, tzinfo=UTC))


@pytest_asyncio.fixture
async def client(session_factory, clock):
    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        async with session_factory() as session:
            yield SqlAlchemyUnitOfWork(session)

    def override_get_root_admin_settings():
        return RootAdminSettings(email=ROOT_EMAIL, password=ROOT_PASSWORD, bcrypt_rounds=4)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_root_admin_settings] = override_get_root_admin_settings
    app.dependency_overrides[get_clock] = lambda: clock

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def admin_headers(client):
    """Bearer header of the bootstrapped root admin."""
    response = await client.post("/auth/login", json={
        "email": ROOT_EMAIL,
        "password": ROOT_PASSWORD,
        "client_os": "Linux",
    })
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['session']['access_token']}"}


@pytest.fixture
def add_account(client, admin_headers):
    async def _add(**fields):
        payload = {
            "name": "Alice",
            "email": "alice@example.com",
            "password": "AlicePass123!",
        }
        payload.update(fields)
        response = await client.post("/admin/accounts", json=payload, headers=admin_headers)
        assert response.status_code == 201, response.text
        return response.json()

    return _add


@pytest.fixture
def login(client):
    async def _login(email="alice@example.com", password="AlicePass123!", client_os="Windows"):
        return await client.post("/auth/login", json={
            "email": email,
            "password": password,
            "client_os": client_os,
        })

    return _login

