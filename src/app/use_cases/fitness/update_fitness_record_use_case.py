from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.validation import validation_error
from src.domain.validation import validate_fitness_record
from src.domain.validator import Validator
from src.libs.result import Result, Return
from .dtos import FitnessRecordInfo, FitnessRecordResponse, UpdateFitnessRecordCommand
from .get_fitness_record_use_case import RECORD_NOT_FOUND


class UpdateFitnessRecordUseCase:
    """Partially update a record; omitted fields keep their value"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, record_id: int, command: UpdateFitnessRecordCommand) -> Result[FitnessRecordResponse]:
        async with self.uow:
            record = await self.uow.fitness_records.get(record_id)
            if record is None:
                return Return.err(RECORD_NOT_FOUND)

            steps = record.steps if command.steps is None else command.steps
            cups = record.cups if command.cups is None else command.cups
            date = record.date if command.date is None else command.date

            v = Validator()
            validate_fitness_record(v, steps, cups, date)
            if not v.valid():
                return Return.err(validation_error(v))

            record.steps = steps
            record.cups = cups
            record.date = date

            record = await self.uow.fitness_records.update(record)
            await self.uow.commit()

            return Return.ok(FitnessRecordResponse(record=FitnessRecordInfo.from_record(record)))
