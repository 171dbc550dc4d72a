import pytest
from httpx import AsyncClient


async def _authenticate(client: AsyncClient, payload) -> dict:
    response = await client.post(
        "/v1/tokens/authentication",
        json={"email": payload["email"], "password": payload["password"]},
    )
    return {"Authorization": f"Bearer {response.json()['authentication_token']['token']}"}


@pytest.mark.asyncio
async def test_gates_answer_with_three_distinct_responses(
    client: AsyncClient, register_user, activated_user, test_data
):
    """
    Given POST /v1/fitness, gated by records:write
    Then an anonymous caller gets 401 AUTHENTICATION_REQUIRED
    And an unactivated user gets 403 INACTIVE_ACCOUNT
    And an activated user without records:write gets 403 NOT_PERMITTED
    """
    body = {"steps": 100, "cups": 1}

    anonymous = await client.post("/v1/fitness", json=body)

    bob = test_data.get_copy("bob")
    await register_user(bob)
    unactivated = await client.post("/v1/fitness", json=body, headers=await _authenticate(client, bob))

    _, headers = await activated_user("alice")
    unpermitted = await client.post("/v1/fitness", json=body, headers=headers)

    assert anonymous.status_code == 401
    assert anonymous.json()["error"]["code"] == "AUTHENTICATION_REQUIRED"
    assert unactivated.status_code == 403
    assert unactivated.json()["error"]["code"] == "INACTIVE_ACCOUNT"
    assert unpermitted.status_code == 403
    assert unpermitted.json()["error"]["code"] == "NOT_PERMITTED"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "authorization",
    [
        "Token abc123",
        "Bearer",
        "bearer AAAAAAAAAAAAAAAAAAAAAAAAAA",
        "Bearer abc123",
        "Bearer AAAAAAAAAAAAAAAAAAAAAAAAAA extra",
        "Bearer AAAAAAAAAAAAAAAAAAAAAAAAAA",
    ],
)
async def test_bad_authorization_header_is_rejected(client: AsyncClient, authorization):
    # Even on a route with no gate at all
    response = await client.get("/v1/healthcheck", headers={"Authorization": authorization})

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "INVALID_AUTHENTICATION_TOKEN"
    assert response.headers["www-authenticate"] == "Bearer"


@pytest.mark.asyncio
async def test_activation_token_is_not_a_bearer_token(client: AsyncClient, register_user, test_data):
    _, activation_token = await register_user(test_data.get_copy("alice"))

    response = await client.get(
        "/v1/healthcheck", headers={"Authorization": f"Bearer {activation_token}"}
    )

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "INVALID_AUTHENTICATION_TOKEN"


@pytest.mark.asyncio
async def test_permissions_are_read_on_every_request(
    client: AsyncClient, activated_user, grant
):
    user_id, headers = await activated_user("alice")

    before = await client.post("/v1/fitness", json={"steps": 10}, headers=headers)
    await grant(user_id, "records:write")
    after = await client.post("/v1/fitness", json={"steps": 10}, headers=headers)

    assert before.status_code == 403
    assert after.status_code == 201
