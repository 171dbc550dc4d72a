from datetime import timedelta
from unittest.mock import ANY

import bcrypt
import pytest

from src.app.use_cases.users import RegisterUserCommand, RegisterUserUseCase
from src.domain.base import utcnow
from src.domain.entities import TokenScope, User
from src.domain.errors import DuplicateEmailError
from src.domain.tokens import generate_token

TTL = timedelta(hours=24)


def _insert_returning(user_id: int):
    async def _insert(user: User) -> User:
        user.id = user_id
        user.created_at = utcnow()
        return user

    return _insert


@pytest.mark.asyncio
async def test_successful_registration(mock_uow, mock_mailer, mock_background):
    # Arrange
    mock_uow.users.insert.side_effect = _insert_returning(7)
    issued = generate_token(7, TTL, TokenScope.activation)
    mock_uow.tokens.new.return_value = issued

    use_case = RegisterUserUseCase(
        mock_uow, mock_mailer, mock_background, activation_ttl=TTL, default_permissions=["records:read"]
    )
    command = RegisterUserCommand(name="Alice", email="alice@example.com", password="pa55word")

    # Act
    result = await use_case.execute(command)

    # Assert
    assert result.is_ok()
    user = result.value.user
    assert user.id == 7
    assert user.activated is False

    inserted = mock_uow.users.insert.call_args.args[0]
    assert inserted.password_hash != "pa55word"
    assert bcrypt.checkpw(b"pa55word", inserted.password_hash.encode())

    mock_uow.permissions.add_for_user.assert_awaited_once_with(7, "records:read")
    mock_uow.tokens.new.assert_awaited_once_with(7, TTL, TokenScope.activation)
    mock_uow.commit.assert_awaited_once()

    mock_background.run.assert_called_once_with(
        mock_mailer.send,
        "alice@example.com",
        "user_welcome.html",
        {"activation_token": issued.plaintext, "user_id": 7, "expires_in_hours": 24},
    )


@pytest.mark.asyncio
async def test_duplicate_email_becomes_field_error(mock_uow, mock_mailer, mock_background):
    mock_uow.users.insert.side_effect = DuplicateEmailError("alice@example.com")

    use_case = RegisterUserUseCase(mock_uow, mock_mailer, mock_background, activation_ttl=TTL)
    result = await use_case.execute(
        RegisterUserCommand(name="Alice", email="alice@example.com", password="pa55word")
    )

    assert result.is_err()
    assert result.error.code == "VALIDATION_FAILED"
    assert result.error.details == {"email": "a user with this email already exists"}
    mock_uow.commit.assert_not_called()
    mock_background.run.assert_not_called()


@pytest.mark.asyncio
async def test_invalid_input_touches_nothing(mock_uow, mock_mailer, mock_background):
    use_case = RegisterUserUseCase(mock_uow, mock_mailer, mock_background, activation_ttl=TTL)

    result = await use_case.execute(RegisterUserCommand(name="", email="nope", password="pa55word"))

    assert result.is_err()
    assert set(result.error.details) == {"name", "email"}
    mock_uow.users.insert.assert_not_called()


@pytest.mark.asyncio
async def test_no_default_permissions(mock_uow, mock_mailer, mock_background):
    mock_uow.users.insert.side_effect = _insert_returning(1)
    mock_uow.tokens.new.return_value = generate_token(1, TTL, TokenScope.activation)

    use_case = RegisterUserUseCase(mock_uow, mock_mailer, mock_background, activation_ttl=TTL)
    result = await use_case.execute(
        RegisterUserCommand(name="Alice", email="alice@example.com", password="pa55word")
    )

    assert result.is_ok()
    mock_uow.permissions.add_for_user.assert_not_called()
    mock_background.run.assert_called_once_with(mock_mailer.send, "alice@example.com", "user_welcome.html", ANY)
