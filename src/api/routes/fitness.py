import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from pydantic import BaseModel, ConfigDict

from config import ApplicationConfig
from src.api.error import ClientError, ServerError
from src.api.utils.context import CurrentUser
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.fitness import (
    CreateFitnessRecordCommand,
    CreateFitnessRecordUseCase,
    DeleteFitnessRecordUseCase,
    FitnessRecordListResponse,
    FitnessRecordResponse,
    GetFitnessRecordUseCase,
    ListFitnessRecordsQuery,
    ListFitnessRecordsUseCase,
    UpdateFitnessRecordCommand,
    UpdateFitnessRecordUseCase,
)
from src.app.use_cases.users import MessageResponse
from src.depends import get_unit_of_work, require_permission
from src.libs.result import Error

router = APIRouter(prefix="/fitness", tags=["Fitness"])

READ_PERMISSION = "records:read"
WRITE_PERMISSION = "records:write"


def _raise_for_error(error: Error):
    if error.code == "VALIDATION_FAILED":
        raise ClientError(error, status_code=status.HTTP_422_UNPROCESSABLE_ENTITY)
    elif error.code == "RECORD_NOT_FOUND":
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    raise ServerError(error)


@router.get(
    "",
    status_code=status.HTTP_200_OK,
    response_model=FitnessRecordListResponse,
    response_model_exclude_none=True,
    dependencies=[Depends(require_permission(READ_PERMISSION))],
)
async def list_fitness_records(
    user_id: Optional[int] = Query(None),
    steps: Optional[int] = Query(None),
    cups: Optional[int] = Query(None),
    date: Optional[datetime.date] = Query(None),
    page: int = Query(1),
    page_size: int = Query(20),
    sort: str = Query("id"),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Fitness Records

    Requires: records:read

    Raises:
        - 401/403: authentication, activation or permission gate failed
        - 422 Unprocessable Entity: invalid page, page_size or sort
    """
    query = ListFitnessRecordsQuery(
        user_id=user_id,
        steps=steps,
        cups=cups,
        date=date,
        page=page,
        page_size=page_size,
        sort=sort,
    )
    result = await ListFitnessRecordsUseCase(uow).execute(query)

    if result.is_err():
        _raise_for_error(result.error)

    return result.value


class CreateFitnessRecordRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    steps: int = 0
    cups: int = 0
    date: Optional[datetime.date] = None


@router.post("", status_code=status.HTTP_201_CREATED, response_model=FitnessRecordResponse)
async def create_fitness_record(
    request: CreateFitnessRecordRequest,
    response: Response,
    user: CurrentUser = Depends(require_permission(WRITE_PERMISSION)),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Fitness Record

    The record belongs to the calling user. The Location header points at
    the new record.

    Requires: records:write
    """
    command = CreateFitnessRecordCommand(steps=request.steps, cups=request.cups, date=request.date)
    result = await CreateFitnessRecordUseCase(uow).execute(user.id, command)

    if result.is_err():
        _raise_for_error(result.error)

    record = result.value.record
    response.headers["Location"] = f"{ApplicationConfig.API_PREFIX}/fitness/{record.id}"
    return result.value


@router.get(
    "/{record_id}",
    status_code=status.HTTP_200_OK,
    response_model=FitnessRecordResponse,
    dependencies=[Depends(require_permission(READ_PERMISSION))],
)
async def show_fitness_record(record_id: int, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Show Fitness Record

    Requires: records:read
    """
    result = await GetFitnessRecordUseCase(uow).execute(record_id)

    if result.is_err():
        _raise_for_error(result.error)

    return result.value


class UpdateFitnessRecordRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    steps: Optional[int] = None
    cups: Optional[int] = None
    date: Optional[datetime.date] = None


@router.patch(
    "/{record_id}",
    status_code=status.HTTP_200_OK,
    response_model=FitnessRecordResponse,
    dependencies=[Depends(require_permission(WRITE_PERMISSION))],
)
async def update_fitness_record(
    record_id: int,
    request: UpdateFitnessRecordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Fitness Record

    Only the fields present in the body change.

    Requires: records:write
    """
    command = UpdateFitnessRecordCommand(steps=request.steps, cups=request.cups, date=request.date)
    result = await UpdateFitnessRecordUseCase(uow).execute(record_id, command)

    if result.is_err():
        _raise_for_error(result.error)

    return result.value


@router.delete(
    "/{record_id}",
    status_code=status.HTTP_200_OK,
    response_model=MessageResponse,
    dependencies=[Depends(require_permission(WRITE_PERMISSION))],
)
async def delete_fitness_record(record_id: int, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Delete Fitness Record

    Requires: records:write
    """
    result = await DeleteFitnessRecordUseCase(uow).execute(record_id)

    if result.is_err():
        _raise_for_error(result.error)

    return result.value
