import pytest
from httpx import AsyncClient

JSON_HEADERS = {"Content-Type": "application/json"}


@pytest.mark.asyncio
async def test_unknown_key_is_rejected(client: AsyncClient, test_data):
    payload = test_data.get_copy("alice")
    payload["role"] = "admin"

    response = await client.post("/v1/users", json=payload)

    assert response.status_code == 400
    assert response.json()["error"] == {
        "code": "BAD_REQUEST",
        "message": 'body contains unknown key "role"',
    }


@pytest.mark.asyncio
async def test_empty_body_is_rejected(client: AsyncClient):
    response = await client.post("/v1/users", content=b"", headers=JSON_HEADERS)

    assert response.status_code == 400
    assert response.json()["error"]["message"] == "body must not be empty"


@pytest.mark.asyncio
async def test_badly_formed_json_is_rejected(client: AsyncClient):
    response = await client.post("/v1/users", content=b'{"name": "Alice",', headers=JSON_HEADERS)

    assert response.status_code == 400
    assert response.json()["error"]["message"] == "body contains badly-formed JSON"


@pytest.mark.asyncio
async def test_multiple_json_values_are_rejected(client: AsyncClient):
    response = await client.post(
        "/v1/tokens/activation",
        content=b'{"email": "alice@example.com"}{"email": "bob@example.com"}',
        headers=JSON_HEADERS,
    )

    assert response.status_code == 400
    assert response.json()["error"]["message"] == "body must only contain a single JSON value"


@pytest.mark.asyncio
async def test_incorrect_json_type_is_rejected(client: AsyncClient):
    response = await client.post(
        "/v1/users", json={"name": 123, "email": "alice@example.com", "password": "pa55word"}
    )

    assert response.status_code == 400
    assert response.json()["error"]["message"] == 'body contains incorrect JSON type for field "name"'


@pytest.mark.asyncio
async def test_non_object_body_is_rejected(client: AsyncClient):
    response = await client.post("/v1/users", json=["alice@example.com"])

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "BAD_REQUEST"


@pytest.mark.asyncio
async def test_oversized_body_is_rejected(client: AsyncClient):
    response = await client.post(
        "/v1/users", content=b" " * (1_048_576 + 1), headers=JSON_HEADERS
    )

    assert response.status_code == 400
    assert response.json()["error"]["message"] == "body must not be larger than 1048576 bytes"


@pytest.mark.asyncio
async def test_oversized_streamed_body_is_rejected(client: AsyncClient):
    async def chunks():
        # No Content-Length: the body arrives chunked
        for _ in range(32):
            yield b" " * 65_536

    response = await client.post("/v1/users", content=chunks(), headers=JSON_HEADERS)

    assert "content-length" not in response.request.headers
    assert response.status_code == 400
    assert response.json()["error"] == {
        "code": "BAD_REQUEST",
        "message": "body must not be larger than 1048576 bytes",
    }
