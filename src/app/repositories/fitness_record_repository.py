import datetime
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from src.domain.entities import FitnessRecord
from src.domain.filters import Filters, Metadata


class IFitnessRecordRepository(ABC):
    """FitnessRecord repository interface - application layer"""

    @abstractmethod
    async def insert(self, record: FitnessRecord) -> FitnessRecord:
        """Insert a new record"""
        pass

    @abstractmethod
    async def get(self, record_id: int) -> Optional[FitnessRecord]:
        """Get record by ID"""
        pass

    @abstractmethod
    async def get_all(
        self,
        user_id: Optional[int],
        steps: Optional[int],
        cups: Optional[int],
        date: Optional[datetime.date],
        filters: Filters,
    ) -> Tuple[List[FitnessRecord], Metadata]:
        """List records matching the filters, one page at a time"""
        pass

    @abstractmethod
    async def update(self, record: FitnessRecord) -> FitnessRecord:
        """Update existing record"""
        pass

    @abstractmethod
    async def delete(self, record_id: int) -> bool:
        """Delete a record; False when it does not exist"""
        pass
