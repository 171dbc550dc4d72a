from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.validation import validation_error
from src.domain.filters import Filters
from src.domain.validation import validate_filters
from src.domain.validator import Validator
from src.libs.result import Result, Return
from .dtos import FitnessRecordInfo, FitnessRecordListResponse, ListFitnessRecordsQuery

SORT_SAFELIST = [
    "id", "user_id", "steps", "cups", "date",
    "-id", "-user_id", "-steps", "-cups", "-date",
]


class ListFitnessRecordsUseCase:
    """
    Use case for listing records.

    Filters on user_id, steps, cups and date are exact matches; absent
    filters match everything. Results are paginated and sorted by one of
    SORT_SAFELIST, ties broken by ascending id.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, query: ListFitnessRecordsQuery) -> Result[FitnessRecordListResponse]:
        filters = Filters(
            page=query.page,
            page_size=query.page_size,
            sort=query.sort,
            sort_safelist=SORT_SAFELIST,
        )

        v = Validator()
        validate_filters(v, filters)
        if not v.valid():
            return Return.err(validation_error(v))

        async with self.uow:
            records, metadata = await self.uow.fitness_records.get_all(
                query.user_id, query.steps, query.cups, query.date, filters
            )

            return Return.ok(
                FitnessRecordListResponse(
                    records=[FitnessRecordInfo.from_record(record) for record in records],
                    metadata=metadata,
                )
            )
