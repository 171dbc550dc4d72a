import pytest
from httpx import ASGITransport, AsyncClient

from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.app import create_app
from src.depends import get_unit_of_work
from tests.fixtures.fakes import TestConfig


class LimitedConfig(TestConfig):
    LIMITER_ENABLED = True
    LIMITER_RPS = 0.001
    LIMITER_BURST = 2
    CORS_ORIGINS = ["https://trusted.example"]


def _client_for(app, db_session) -> AsyncClient:
    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


@pytest.mark.asyncio
async def test_unhandled_exception_becomes_server_error(app, client: AsyncClient):
    async def explode():
        raise RuntimeError("boom")

    app.add_api_route("/v1/explode", explode, methods=["GET"])

    response = await client.get("/v1/explode")

    assert response.status_code == 500
    assert response.json()["error"]["code"] == "SERVER_ERROR"
    assert "boom" not in response.text
    assert response.headers["connection"] == "close"


@pytest.mark.asyncio
async def test_rate_limit_rejects_requests_over_burst(db_session):
    app = create_app(LimitedConfig)

    async with _client_for(app, db_session) as client:
        responses = [await client.get("/v1/healthcheck") for _ in range(3)]

    assert [r.status_code for r in responses] == [200, 200, 429]
    assert responses[-1].json()["error"]["code"] == "RATE_LIMIT_EXCEEDED"


@pytest.mark.asyncio
async def test_cors_reflects_trusted_origin_only(db_session):
    app = create_app(LimitedConfig)

    async with _client_for(app, db_session) as client:
        trusted = await client.get(
            "/v1/healthcheck", headers={"Origin": "https://trusted.example"}
        )
        untrusted = await client.get(
            "/v1/healthcheck", headers={"Origin": "https://evil.example"}
        )

    assert trusted.headers["access-control-allow-origin"] == "https://trusted.example"
    assert "access-control-allow-origin" not in untrusted.headers


@pytest.mark.asyncio
async def test_cors_preflight(db_session):
    app = create_app(LimitedConfig)

    async with _client_for(app, db_session) as client:
        response = await client.options(
            "/v1/fitness",
            headers={
                "Origin": "https://trusted.example",
                "Access-Control-Request-Method": "PUT",
            },
        )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "https://trusted.example"
    assert "PUT" in response.headers["access-control-allow-methods"]
