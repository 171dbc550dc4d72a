from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.users.dtos import MessageResponse
from src.libs.result import Result, Return
from .get_fitness_record_use_case import RECORD_NOT_FOUND


class DeleteFitnessRecordUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, record_id: int) -> Result[MessageResponse]:
        async with self.uow:
            deleted = await self.uow.fitness_records.delete(record_id)
            if not deleted:
                return Return.err(RECORD_NOT_FOUND)

            await self.uow.commit()

        return Return.ok(MessageResponse(message="record successfully deleted"))
