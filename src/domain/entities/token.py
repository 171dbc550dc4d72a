"""
Token Entity

Hashed activation and authentication tokens.
"""

from datetime import datetime

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from .enums import TokenScope


class Token(SQLModel, table=True):
    """
    Token entity - digest of a bearer token handed out once.

    Business Rules:
    - Only the SHA-256 hex digest of the plaintext is stored
    - Scope separates activation from authentication tokens
    - Expired tokens never resolve (checked at lookup)
    - Deleted in bulk per user and scope when consumed or superseded
    """

    __tablename__ = "tokens"

    hash: str = Field(primary_key=True, max_length=64)  # SHA-256 output
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)

    scope: TokenScope = Field(nullable=False)
    expiry: datetime = Field(sa_column=Column(DateTime, nullable=False))

    __table_args__ = (
        Index("idx_token_user_scope", "user_id", "scope"),
        Index("idx_token_expiry", "expiry"),
    )
