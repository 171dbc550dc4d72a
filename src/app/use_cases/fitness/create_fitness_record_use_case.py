from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.validation import validation_error
from src.domain.entities import FitnessRecord
from src.domain.validation import validate_fitness_record
from src.domain.validator import Validator
from src.libs.result import Result, Return
from .dtos import CreateFitnessRecordCommand, FitnessRecordInfo, FitnessRecordResponse


class CreateFitnessRecordUseCase:
    """Record a day of activity for the calling user"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: int, command: CreateFitnessRecordCommand) -> Result[FitnessRecordResponse]:
        v = Validator()
        validate_fitness_record(v, command.steps, command.cups, command.date)
        if not v.valid():
            return Return.err(validation_error(v))

        async with self.uow:
            record = FitnessRecord(user_id=user_id, steps=command.steps, cups=command.cups)
            if command.date is not None:
                record.date = command.date

            record = await self.uow.fitness_records.insert(record)
            await self.uow.commit()

            return Return.ok(FitnessRecordResponse(record=FitnessRecordInfo.from_record(record)))
