from abc import ABC, abstractmethod

from src.app.repositories.fitness_record_repository import IFitnessRecordRepository
from src.app.repositories.permission_repository import IPermissionRepository
from src.app.repositories.token_repository import ITokenRepository
from src.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    users: IUserRepository
    tokens: ITokenRepository
    permissions: IPermissionRepository
    fitness_records: IFitnessRecordRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
