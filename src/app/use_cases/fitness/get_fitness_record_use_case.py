from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Error, Result, Return
from .dtos import FitnessRecordInfo, FitnessRecordResponse

RECORD_NOT_FOUND = Error("RECORD_NOT_FOUND", "the requested resource could not be found")


class GetFitnessRecordUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, record_id: int) -> Result[FitnessRecordResponse]:
        async with self.uow:
            record = await self.uow.fitness_records.get(record_id)
            if record is None:
                return Return.err(RECORD_NOT_FOUND)

            return Return.ok(FitnessRecordResponse(record=FitnessRecordInfo.from_record(record)))
