"""
FitnessRecord Entity

One day of tracked activity for a user.
"""

import datetime
from typing import Optional

from sqlmodel import Field, Index, SQLModel

from src.domain.base import utcnow


class FitnessRecord(SQLModel, table=True):
    """
    FitnessRecord entity - steps walked and cups of water drunk on a day.

    Business Rules:
    - steps and cups are never negative
    - date defaults to the current UTC day
    """

    __tablename__ = "daily_fitness"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)

    steps: int = Field(default=0)
    cups: int = Field(default=0)
    date: datetime.date = Field(default_factory=lambda: utcnow().date())

    __table_args__ = (Index("idx_fitness_user_date", "user_id", "date"),)
