import asyncio

from sqlmodel.ext.asyncio.session import AsyncSession

DEFAULT_QUERY_TIMEOUT = 3.0


class SqlRepository:
    """
    Base for SQLModel repositories.

    Every statement runs under a deadline; a statement that does not finish
    in time raises ``TimeoutError`` instead of blocking the request.
    """

    def __init__(self, session: AsyncSession, query_timeout: float = DEFAULT_QUERY_TIMEOUT):
        self.session = session
        self.query_timeout = query_timeout

    async def _exec(self, stmt):
        """Run a ``select`` through SQLModel's ``exec`` (scalar results)"""
        async with asyncio.timeout(self.query_timeout):
            return await self.session.exec(stmt)

    async def _execute(self, stmt):
        """Run an ``update``/``delete``/``insert`` statement"""
        async with asyncio.timeout(self.query_timeout):
            return await self.session.execute(stmt)

    async def _flush(self, *instances):
        async with asyncio.timeout(self.query_timeout):
            await self.session.flush()
            for instance in instances:
                await self.session.refresh(instance)
