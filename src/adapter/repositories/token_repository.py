from datetime import timedelta

from sqlalchemy import delete

from src.adapter.repositories.base import SqlRepository
from src.app.repositories.token_repository import ITokenRepository
from src.domain.entities import Token, TokenScope
from src.domain.tokens import IssuedToken, generate_token


class TokenRepository(SqlRepository, ITokenRepository):
    """Token repository implementation using SQLModel"""

    async def new(self, user_id: int, ttl: timedelta, scope: TokenScope) -> IssuedToken:
        """Generate a token and store its hash"""
        token = generate_token(user_id, ttl, scope)
        await self.insert(token)
        return token

    async def insert(self, token: IssuedToken) -> None:
        """Store the hash of an issued token"""
        self.session.add(token.to_entity())
        await self._flush()

    async def delete_all_for_user(self, scope: TokenScope, user_id: int) -> int:
        """Delete every token of a user in a scope"""
        stmt = delete(Token).where(Token.scope == scope, Token.user_id == user_id)
        result = await self._execute(stmt)
        return result.rowcount
