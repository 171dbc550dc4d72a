from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import select, update

from src.adapter.repositories.base import SqlRepository
from src.app.repositories.user_repository import IUserRepository
from src.domain.base import utcnow
from src.domain.entities import Token, TokenScope, User
from src.domain.errors import DuplicateEmailError, EditConflictError
from src.domain.tokens import hash_token


class UserRepository(SqlRepository, IUserRepository):
    """User repository implementation using SQLModel"""

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address"""
        stmt = select(User).where(User.email == email)
        result = await self._exec(stmt)
        return result.one_or_none()

    async def get_by_id(self, user_id: int) -> Optional[User]:
        """Get user by ID"""
        stmt = select(User).where(User.id == user_id)
        result = await self._exec(stmt)
        return result.one_or_none()

    async def insert(self, user: User) -> User:
        """Insert a new user, translating the unique email violation"""
        email = user.email
        self.session.add(user)
        try:
            await self._flush(user)
        except IntegrityError as exc:
            if "email" in str(exc.orig).lower():
                raise DuplicateEmailError(email) from exc
            raise
        return user

    async def update(self, user: User) -> User:
        """
        Update a user only if its version is unchanged.

        The version check and the increment happen in one UPDATE statement,
        so of two writers that read the same version exactly one succeeds.
        """
        stmt = (
            update(User)
            .where(User.id == user.id, User.version == user.version)
            .values(
                name=user.name,
                email=user.email,
                password_hash=user.password_hash,
                activated=user.activated,
                version=User.version + 1,
            )
        )
        user_id, version, email = user.id, user.version, user.email
        try:
            # The instance is dirty; it must not be flushed ahead of the version check
            with self.session.no_autoflush:
                result = await self._execute(stmt)
        except IntegrityError as exc:
            if "email" in str(exc.orig).lower():
                raise DuplicateEmailError(email) from exc
            raise

        if result.rowcount == 0:
            raise EditConflictError(f"user {user_id} changed since version {version}")

        await self._flush(user)
        return user

    async def get_for_token(self, scope: TokenScope, plaintext: str) -> Optional[User]:
        """
        Get the owner of a token.

        Unknown hash, wrong scope and expired token all give None.
        """
        stmt = (
            select(User)
            .join(Token, Token.user_id == User.id)
            .where(
                Token.hash == hash_token(plaintext),
                Token.scope == scope,
                Token.expiry > utcnow(),
            )
        )
        result = await self._exec(stmt)
        return result.one_or_none()
