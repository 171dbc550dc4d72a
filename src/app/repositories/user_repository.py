from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities import TokenScope, User


class IUserRepository(ABC):
    """User repository interface - application layer"""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address"""
        pass

    @abstractmethod
    async def get_by_id(self, user_id: int) -> Optional[User]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def insert(self, user: User) -> User:
        """
        Insert a new user

        Raises:
            DuplicateEmailError: email already registered
        """
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        """
        Update a user whose version still matches the stored one

        Raises:
            EditConflictError: stored version changed since the user was read
        """
        pass

    @abstractmethod
    async def get_for_token(self, scope: TokenScope, plaintext: str) -> Optional[User]:
        """Get the owner of an unexpired token of the given scope"""
        pass
