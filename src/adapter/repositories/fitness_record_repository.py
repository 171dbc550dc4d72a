import datetime
from typing import List, Optional, Tuple

from sqlalchemy import delete, func
from sqlmodel import select

from src.adapter.repositories.base import SqlRepository
from src.app.repositories.fitness_record_repository import IFitnessRecordRepository
from src.domain.entities import FitnessRecord
from src.domain.filters import Filters, Metadata, calculate_metadata


class FitnessRecordRepository(SqlRepository, IFitnessRecordRepository):
    """FitnessRecord repository implementation using SQLModel"""

    async def insert(self, record: FitnessRecord) -> FitnessRecord:
        """Insert a new record"""
        self.session.add(record)
        await self._flush(record)
        return record

    async def get(self, record_id: int) -> Optional[FitnessRecord]:
        """Get record by ID"""
        stmt = select(FitnessRecord).where(FitnessRecord.id == record_id)
        result = await self._exec(stmt)
        return result.one_or_none()

    async def get_all(
        self,
        user_id: Optional[int],
        steps: Optional[int],
        cups: Optional[int],
        date: Optional[datetime.date],
        filters: Filters,
    ) -> Tuple[List[FitnessRecord], Metadata]:
        """List one page of records; absent filters match every record"""
        conditions = []
        if user_id is not None:
            conditions.append(FitnessRecord.user_id == user_id)
        if steps is not None:
            conditions.append(FitnessRecord.steps == steps)
        if cups is not None:
            conditions.append(FitnessRecord.cups == cups)
        if date is not None:
            conditions.append(FitnessRecord.date == date)

        count_stmt = select(func.count()).select_from(FitnessRecord).where(*conditions)
        total_records = (await self._exec(count_stmt)).one()

        column = getattr(FitnessRecord, filters.sort_column())
        order = column.desc() if filters.sort_descending() else column.asc()
        stmt = (
            select(FitnessRecord)
            .where(*conditions)
            .order_by(order, FitnessRecord.id.asc())
            .limit(filters.limit())
            .offset(filters.offset())
        )
        result = await self._exec(stmt)
        records = list(result.all())

        return records, calculate_metadata(total_records, filters.page, filters.page_size)

    async def update(self, record: FitnessRecord) -> FitnessRecord:
        """Update existing record"""
        self.session.add(record)
        await self._flush(record)
        return record

    async def delete(self, record_id: int) -> bool:
        """Delete a record by ID"""
        stmt = delete(FitnessRecord).where(FitnessRecord.id == record_id)
        result = await self._execute(stmt)
        return result.rowcount > 0
