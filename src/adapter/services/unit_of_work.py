from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.base import DEFAULT_QUERY_TIMEOUT
from src.adapter.repositories.fitness_record_repository import FitnessRecordRepository
from src.adapter.repositories.permission_repository import PermissionRepository
from src.adapter.repositories.token_repository import TokenRepository
from src.adapter.repositories.user_repository import UserRepository
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession, query_timeout: float = DEFAULT_QUERY_TIMEOUT):
        self.session = session
        self.query_timeout = query_timeout

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.users = UserRepository(self.session, self.query_timeout)
        self.tokens = TokenRepository(self.session, self.query_timeout)
        self.permissions = PermissionRepository(self.session, self.query_timeout)
        self.fitness_records = FitnessRecordRepository(self.session, self.query_timeout)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
