from datetime import timedelta

import pytest
import pytest_asyncio

from src.adapter.repositories.token_repository import TokenRepository
from src.adapter.repositories.user_repository import UserRepository
from src.domain.entities import TokenScope, User
from src.domain.tokens import hash_token

DAY = timedelta(days=1)


@pytest_asyncio.fixture
async def user(db_session):
    user = User(name="Alice", email="alice@example.com", password_hash="x" * 60)
    await UserRepository(db_session).insert(user)
    await db_session.commit()
    return user


@pytest.mark.asyncio
async def test_new_token_resolves_to_its_user(db_session, user):
    tokens = TokenRepository(db_session)
    users = UserRepository(db_session)

    issued = await tokens.new(user.id, DAY, TokenScope.authentication)

    assert len(issued.plaintext) == 26
    assert issued.hash == hash_token(issued.plaintext)
    found = await users.get_for_token(TokenScope.authentication, issued.plaintext)
    assert found is not None
    assert found.id == user.id


@pytest.mark.asyncio
async def test_mutated_token_does_not_resolve(db_session, user):
    tokens = TokenRepository(db_session)
    users = UserRepository(db_session)
    issued = await tokens.new(user.id, DAY, TokenScope.authentication)

    replacement = "B" if issued.plaintext[0] != "B" else "C"
    mutated = replacement + issued.plaintext[1:]

    assert await users.get_for_token(TokenScope.authentication, mutated) is None


@pytest.mark.asyncio
async def test_expired_token_does_not_resolve(db_session, user):
    tokens = TokenRepository(db_session)
    users = UserRepository(db_session)

    issued = await tokens.new(user.id, timedelta(seconds=-1), TokenScope.authentication)

    assert await users.get_for_token(TokenScope.authentication, issued.plaintext) is None


@pytest.mark.asyncio
async def test_token_only_resolves_in_its_own_scope(db_session, user):
    tokens = TokenRepository(db_session)
    users = UserRepository(db_session)

    issued = await tokens.new(user.id, DAY, TokenScope.activation)

    assert await users.get_for_token(TokenScope.authentication, issued.plaintext) is None
    assert await users.get_for_token(TokenScope.activation, issued.plaintext) is not None


@pytest.mark.asyncio
async def test_delete_all_for_user_leaves_other_scopes(db_session, user):
    tokens = TokenRepository(db_session)
    users = UserRepository(db_session)
    activation = await tokens.new(user.id, DAY, TokenScope.activation)
    authentication = await tokens.new(user.id, DAY, TokenScope.authentication)

    deleted = await tokens.delete_all_for_user(TokenScope.activation, user.id)

    assert deleted == 1
    assert await users.get_for_token(TokenScope.activation, activation.plaintext) is None
    assert await users.get_for_token(TokenScope.authentication, authentication.plaintext) is not None
