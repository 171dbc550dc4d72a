"""
Admin API Routes - System Administration Endpoints

These endpoints are for operators. Authentication is via Admin API Key,
not user bearer tokens.
"""

from typing import List

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, ConfigDict, Field

from src.api.error import ClientError, ServerError
from src.api.utils.admin_auth import verify_admin_api_key
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.admin import GrantPermissionsResponse, GrantPermissionsUseCase
from src.depends import get_unit_of_work

router = APIRouter(prefix="/admin", tags=["Admin"])


class GrantPermissionsRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    codes: List[str] = Field(default_factory=list, description="Permission codes to grant")


@router.post(
    "/users/{user_id}/permissions",
    status_code=status.HTTP_200_OK,
    response_model=GrantPermissionsResponse,
    dependencies=[Depends(verify_admin_api_key)],
)
async def grant_permissions(
    user_id: int,
    request: GrantPermissionsRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Grant Permissions

    Adds permission codes to a user. Already held codes are ignored.

    Requires: X-Admin-API-Key header

    Raises:
        - 401 Unauthorized: Missing or invalid admin API key
        - 404 Not Found: USER_NOT_FOUND
        - 422 Unprocessable Entity: empty or duplicate codes
        - 500 Internal Server Error: Server error
    """
    use_case = GrantPermissionsUseCase(uow)
    result = await use_case.execute(user_id, request.codes)

    if result.is_err():
        error = result.error
        if error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        elif error.code == "VALIDATION_FAILED":
            raise ClientError(error, status_code=status.HTTP_422_UNPROCESSABLE_ENTITY)
        raise ServerError(error)

    return result.value
