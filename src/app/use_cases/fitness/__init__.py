"""
Fitness Record Use Cases

CRUD on daily fitness records.
"""

from .create_fitness_record_use_case import CreateFitnessRecordUseCase
from .list_fitness_records_use_case import ListFitnessRecordsUseCase, SORT_SAFELIST
from .get_fitness_record_use_case import GetFitnessRecordUseCase
from .update_fitness_record_use_case import UpdateFitnessRecordUseCase
from .delete_fitness_record_use_case import DeleteFitnessRecordUseCase
from .dtos import (
    CreateFitnessRecordCommand,
    FitnessRecordInfo,
    FitnessRecordListResponse,
    FitnessRecordResponse,
    ListFitnessRecordsQuery,
    UpdateFitnessRecordCommand,
)

__all__ = [
    # Use Cases
    "CreateFitnessRecordUseCase",
    "ListFitnessRecordsUseCase",
    "GetFitnessRecordUseCase",
    "UpdateFitnessRecordUseCase",
    "DeleteFitnessRecordUseCase",
    "SORT_SAFELIST",
    # DTOs - Commands
    "CreateFitnessRecordCommand",
    "UpdateFitnessRecordCommand",
    "ListFitnessRecordsQuery",
    # DTOs - Responses
    "FitnessRecordResponse",
    "FitnessRecordListResponse",
    "FitnessRecordInfo",
]
