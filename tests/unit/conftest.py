from unittest.mock import AsyncMock, MagicMock

import pytest


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with all repositories"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_email = AsyncMock(return_value=None)
    uow.users.get_by_id = AsyncMock(return_value=None)
    uow.users.get_for_token = AsyncMock(return_value=None)
    uow.users.insert = AsyncMock()
    uow.users.update = AsyncMock(side_effect=lambda user: user)

    uow.tokens = MagicMock()
    uow.tokens.new = AsyncMock()
    uow.tokens.delete_all_for_user = AsyncMock(return_value=0)

    uow.permissions = MagicMock()
    uow.permissions.add_for_user = AsyncMock()
    uow.permissions.get_all_for_user = AsyncMock()

    uow.fitness_records = MagicMock()
    uow.fitness_records.insert = AsyncMock()
    uow.fitness_records.get = AsyncMock(return_value=None)
    uow.fitness_records.get_all = AsyncMock()
    uow.fitness_records.update = AsyncMock(side_effect=lambda record: record)
    uow.fitness_records.delete = AsyncMock(return_value=False)

    return uow


@pytest.fixture
def mock_mailer():
    mailer = MagicMock()
    mailer.send = AsyncMock()
    return mailer


@pytest.fixture
def mock_background():
    background = MagicMock()
    background.run = MagicMock()
    return background
