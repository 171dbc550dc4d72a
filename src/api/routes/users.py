from datetime import timedelta

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, ConfigDict, Field

from config import ApplicationConfig
from src.app.services.background import BackgroundRunner
from src.api.error import ClientError, ServerError
from src.api.utils.context import CurrentUser
from src.app.services.mailer import Mailer
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.users import (
    ActivateUserUseCase,
    ChangePasswordCommand,
    ChangePasswordUseCase,
    MessageResponse,
    RegisterUserCommand,
    RegisterUserUseCase,
    UserResponse,
)
from src.depends import (
    get_background_tasks,
    get_mailer,
    get_unit_of_work,
    require_activated_user,
)

router = APIRouter(prefix="/users", tags=["Users"])


class RegisterUserRequest(BaseModel):
    """
    Registration HTTP request payload

    Only shape is checked here; field rules are applied by the use case so
    that every violation is reported at once.
    """

    model_config = ConfigDict(extra="forbid")

    name: str = Field("", description="Display name")
    email: str = Field("", description="User email address")
    password: str = Field("", description="User password (8 to 72 bytes)")


@router.post("", status_code=status.HTTP_202_ACCEPTED, response_model=UserResponse)
async def register_user(
    request: RegisterUserRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    mailer: Mailer = Depends(get_mailer),
    background: BackgroundRunner = Depends(get_background_tasks),
):
    """
    Register User

    Creates an unactivated user and emails an activation token. The email
    is sent after the response, so the status is 202 Accepted.

    Raises:
        - 422 Unprocessable Entity: invalid fields or email already taken
        - 500 Internal Server Error: Server error
    """
    command = RegisterUserCommand(name=request.name, email=request.email, password=request.password)

    use_case = RegisterUserUseCase(
        uow,
        mailer,
        background,
        activation_ttl=timedelta(hours=ApplicationConfig.ACTIVATION_TOKEN_TTL_HOURS),
        default_permissions=ApplicationConfig.DEFAULT_PERMISSIONS,
    )
    result = await use_case.execute(command)

    if result.is_err():
        error = result.error
        if error.code == "VALIDATION_FAILED":
            raise ClientError(error, status_code=status.HTTP_422_UNPROCESSABLE_ENTITY)
        raise ServerError(error)

    return result.value


class ActivateUserRequest(BaseModel):
    """Activation HTTP request payload"""

    model_config = ConfigDict(extra="forbid")

    token: str = Field("", description="Activation token from the welcome email")


@router.put("/activated", status_code=status.HTTP_200_OK, response_model=UserResponse)
async def activate_user(request: ActivateUserRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Activate User

    Consumes an activation token. All activation tokens of the user are
    deleted in the same transaction.

    Raises:
        - 409 Conflict: user changed concurrently
        - 422 Unprocessable Entity: malformed, unknown or expired token
        - 500 Internal Server Error: Server error
    """
    use_case = ActivateUserUseCase(uow)
    result = await use_case.execute(request.token)

    if result.is_err():
        error = result.error
        if error.code == "VALIDATION_FAILED":
            raise ClientError(error, status_code=status.HTTP_422_UNPROCESSABLE_ENTITY)
        elif error.code == "EDIT_CONFLICT":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    return result.value


class ChangePasswordRequest(BaseModel):
    """Password change HTTP request payload"""

    model_config = ConfigDict(extra="forbid")

    current_password: str = Field("", description="Password in use today")
    new_password: str = Field("", description="Replacement password (8 to 72 bytes)")


@router.put("/password", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def change_password(
    request: ChangePasswordRequest,
    user: CurrentUser = Depends(require_activated_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Change Password

    Every authentication token of the user is revoked, including the one
    that authorized this request.

    Raises:
        - 401 Unauthorized: current password is wrong
        - 409 Conflict: user changed concurrently
        - 422 Unprocessable Entity: invalid new password
        - 500 Internal Server Error: Server error
    """
    command = ChangePasswordCommand(
        current_password=request.current_password, new_password=request.new_password
    )

    use_case = ChangePasswordUseCase(uow)
    result = await use_case.execute(user.id, command)

    if result.is_err():
        error = result.error
        if error.code == "VALIDATION_FAILED":
            raise ClientError(error, status_code=status.HTTP_422_UNPROCESSABLE_ENTITY)
        elif error.code == "INVALID_CREDENTIALS":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        elif error.code == "EDIT_CONFLICT":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        elif error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value
