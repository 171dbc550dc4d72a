from abc import ABC, abstractmethod
from datetime import timedelta

from src.domain.entities import TokenScope
from src.domain.tokens import IssuedToken


class ITokenRepository(ABC):
    """Token repository interface - application layer"""

    @abstractmethod
    async def new(self, user_id: int, ttl: timedelta, scope: TokenScope) -> IssuedToken:
        """Generate a token, store its hash and return it with its plaintext"""
        pass

    @abstractmethod
    async def insert(self, token: IssuedToken) -> None:
        """Store the hash of an issued token"""
        pass

    @abstractmethod
    async def delete_all_for_user(self, scope: TokenScope, user_id: int) -> int:
        """Delete every token of a user in a scope"""
        pass
