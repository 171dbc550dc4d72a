"""
User Entity

Represents a person registered with the fitness tracker.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow


class User(SQLModel, table=True):
    """
    User entity - identity record of a registered person.

    Business Rules:
    - Email must be unique across all users
    - Created unactivated; activated through an activation token
    - Password stored as bcrypt hash (cost factor 12)
    - version increments on every update (optimistic concurrency)
    - Never physically deleted
    """

    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=500)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    activated: bool = Field(default=False)
    version: int = Field(default=1, nullable=False)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_user_activated", "activated"),)
