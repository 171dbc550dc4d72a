from datetime import timedelta

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, ConfigDict, Field

from config import ApplicationConfig
from src.app.services.background import BackgroundRunner
from src.api.error import ClientError, ServerError
from src.app.services.mailer import Mailer
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.tokens import (
    AuthenticationTokenResponse,
    CreateActivationTokenUseCase,
    CreateAuthenticationTokenUseCase,
)
from src.app.use_cases.users import MessageResponse
from src.depends import get_background_tasks, get_mailer, get_unit_of_work

router = APIRouter(prefix="/tokens", tags=["Tokens"])


class AuthenticationTokenRequest(BaseModel):
    """Login HTTP request payload"""

    model_config = ConfigDict(extra="forbid")

    email: str = Field("", description="User email address")
    password: str = Field("", description="User password")


@router.post(
    "/authentication",
    status_code=status.HTTP_201_CREATED,
    response_model=AuthenticationTokenResponse,
)
async def create_authentication_token(
    request: AuthenticationTokenRequest, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    Create Authentication Token

    Returns a bearer token for the Authorization header. The plaintext is
    only ever shown in this response.

    Raises:
        - 401 Unauthorized: unknown email or wrong password
        - 422 Unprocessable Entity: malformed email or password
        - 500 Internal Server Error: Server error
    """
    use_case = CreateAuthenticationTokenUseCase(
        uow, ttl=timedelta(hours=ApplicationConfig.AUTHENTICATION_TOKEN_TTL_HOURS)
    )
    result = await use_case.execute(request.email, request.password)

    if result.is_err():
        error = result.error
        if error.code == "VALIDATION_FAILED":
            raise ClientError(error, status_code=status.HTTP_422_UNPROCESSABLE_ENTITY)
        elif error.code == "INVALID_CREDENTIALS":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        raise ServerError(error)

    return result.value


class ActivationTokenRequest(BaseModel):
    """Resend activation HTTP request payload"""

    model_config = ConfigDict(extra="forbid")

    email: str = Field("", description="User email address")


@router.post("/activation", status_code=status.HTTP_202_ACCEPTED, response_model=MessageResponse)
async def create_activation_token(
    request: ActivationTokenRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    mailer: Mailer = Depends(get_mailer),
    background: BackgroundRunner = Depends(get_background_tasks),
):
    """
    Resend Activation Token

    Supersedes any earlier activation token. Same response whether or not
    the email belongs to an unactivated user.

    Raises:
        - 422 Unprocessable Entity: malformed email
        - 500 Internal Server Error: Server error
    """
    use_case = CreateActivationTokenUseCase(
        uow,
        mailer,
        background,
        ttl=timedelta(hours=ApplicationConfig.ACTIVATION_TOKEN_TTL_HOURS),
    )
    result = await use_case.execute(request.email)

    if result.is_err():
        error = result.error
        if error.code == "VALIDATION_FAILED":
            raise ClientError(error, status_code=status.HTTP_422_UNPROCESSABLE_ENTITY)
        raise ServerError(error)

    return result.value
