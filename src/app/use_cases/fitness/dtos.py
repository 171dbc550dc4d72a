"""
Fitness Record Use Case DTOs (Data Transfer Objects)
"""

import datetime
from typing import List, Optional

from pydantic import BaseModel

from src.domain.entities import FitnessRecord
from src.domain.filters import Metadata


# ============================================================================
# Command DTOs
# ============================================================================


class CreateFitnessRecordCommand(BaseModel):
    steps: int = 0
    cups: int = 0
    date: Optional[datetime.date] = None


class UpdateFitnessRecordCommand(BaseModel):
    """Partial update; None leaves the field unchanged"""

    steps: Optional[int] = None
    cups: Optional[int] = None
    date: Optional[datetime.date] = None


class ListFitnessRecordsQuery(BaseModel):
    user_id: Optional[int] = None
    steps: Optional[int] = None
    cups: Optional[int] = None
    date: Optional[datetime.date] = None
    page: int = 1
    page_size: int = 20
    sort: str = "id"


# ============================================================================
# Response DTOs
# ============================================================================


class FitnessRecordInfo(BaseModel):
    id: int
    user_id: int
    steps: int
    cups: int
    date: datetime.date

    @classmethod
    def from_record(cls, record: FitnessRecord) -> "FitnessRecordInfo":
        return cls(
            id=record.id,
            user_id=record.user_id,
            steps=record.steps,
            cups=record.cups,
            date=record.date,
        )


class FitnessRecordResponse(BaseModel):
    record: FitnessRecordInfo


class FitnessRecordListResponse(BaseModel):
    records: List[FitnessRecordInfo]
    metadata: Metadata
