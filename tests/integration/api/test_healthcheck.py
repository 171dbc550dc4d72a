import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_healthcheck(client: AsyncClient):
    response = await client.get("/v1/healthcheck")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "available"
    assert data["system_info"]["environment"]
    assert data["system_info"]["version"]


@pytest.mark.asyncio
async def test_responses_vary_on_authorization(client: AsyncClient):
    response = await client.get("/v1/healthcheck")

    assert "Authorization" in response.headers.get("vary", "")


@pytest.mark.asyncio
async def test_unknown_route_returns_not_found_envelope(client: AsyncClient):
    response = await client.get("/v1/nowhere")

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOT_FOUND"


@pytest.mark.asyncio
async def test_wrong_method_returns_method_not_allowed_envelope(client: AsyncClient):
    response = await client.delete("/v1/healthcheck")

    assert response.status_code == 405
    data = response.json()
    assert data["error"]["code"] == "METHOD_NOT_ALLOWED"
    assert "DELETE" in data["error"]["message"]
