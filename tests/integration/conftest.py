from typing import Dict, Tuple

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

import src.domain.entities  # noqa: F401
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_unit_of_work
from tests.fixtures.fakes import RecordingMailer, TestConfig
from tests.fixtures.json_loader import TestDataLoader


@pytest_asyncio.fixture
def test_data():
    return TestDataLoader()


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def mailer():
    return RecordingMailer()


@pytest_asyncio.fixture
async def app(db_session, mailer):
    from src.api.app import create_app

    app = create_app(TestConfig)
    app.state.mailer = mailer

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    return app


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    await app.state.background_tasks.wait(5)


@pytest_asyncio.fixture
async def register_user(app, client, mailer):
    """Register a user through the API and return its id and activation token"""

    async def _register(payload: Dict[str, str]) -> Tuple[int, str]:
        response = await client.post("/v1/users", json=payload)
        assert response.status_code == 202, response.text
        await app.state.background_tasks.wait(5)
        return response.json()["user"]["id"], mailer.last_token_for(payload["email"])

    return _register


@pytest_asyncio.fixture
async def activated_user(client, register_user, test_data):
    """An activated user with a bearer token; returns (user_id, headers)"""

    async def _activated(key: str = "alice") -> Tuple[int, Dict[str, str]]:
        payload = test_data.get_copy(key)
        user_id, activation_token = await register_user(payload)

        response = await client.put("/v1/users/activated", json={"token": activation_token})
        assert response.status_code == 200, response.text

        response = await client.post(
            "/v1/tokens/authentication",
            json={"email": payload["email"], "password": payload["password"]},
        )
        assert response.status_code == 201, response.text
        token = response.json()["authentication_token"]["token"]
        return user_id, {"Authorization": f"Bearer {token}"}

    return _activated


@pytest_asyncio.fixture
async def grant(client):
    async def _grant(user_id: int, *codes: str):
        response = await client.post(
            f"/v1/admin/users/{user_id}/permissions",
            json={"codes": list(codes)},
            headers={"X-Admin-API-Key": TestConfig.ADMIN_API_KEY},
        )
        assert response.status_code == 200, response.text
        return response.json()

    return _grant
