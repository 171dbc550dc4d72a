from typing import Optional

from fastapi import Depends, Header, Request, Response, status
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.app.services.background import BackgroundRunner
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError
from src.api.utils.context import ANONYMOUS_USER, CurrentUser, set_current_user
from src.app.services.mailer import Mailer
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import TokenScope
from src.domain.validation import validate_token_plaintext
from src.domain.validator import Validator
from src.libs.result import Error

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session, ApplicationConfig.DB_QUERY_TIMEOUT)


def get_mailer(request: Request) -> Mailer:
    return request.app.state.mailer


def get_background_tasks(request: Request) -> BackgroundRunner:
    return request.app.state.background_tasks


def _invalid_authentication_token() -> ClientError:
    return ClientError(
        Error("INVALID_AUTHENTICATION_TOKEN", "invalid or missing authentication token"),
        status_code=status.HTTP_401_UNAUTHORIZED,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def authenticate(
    request: Request,
    response: Response,
    authorization: Optional[str] = Header(default=None),
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> CurrentUser:
    """
    Resolve the caller from the Authorization header.

    Installed as an application-wide dependency, so it runs for every route.

    Returns:
        ANONYMOUS_USER when no Authorization header is sent, otherwise the
        owner of the bearer token

    Raises:
        ClientError: 401 if the header is not ``Bearer <token>`` or the token
            does not resolve to a user
    """
    response.headers.append("Vary", "Authorization")

    if not authorization:
        set_current_user(request, ANONYMOUS_USER)
        return ANONYMOUS_USER

    header_parts = authorization.split(" ")
    if len(header_parts) != 2 or header_parts[0] != "Bearer":
        raise _invalid_authentication_token()

    token = header_parts[1]

    v = Validator()
    validate_token_plaintext(v, token)
    if not v.valid():
        raise _invalid_authentication_token()

    async with uow:
        user = await uow.users.get_for_token(TokenScope.authentication, token)
        if user is None:
            raise _invalid_authentication_token()
        current_user = CurrentUser.from_user(user)

    set_current_user(request, current_user)
    return current_user


async def require_authenticated_user(
    user: CurrentUser = Depends(authenticate),
) -> CurrentUser:
    if user.is_anonymous:
        raise ClientError(
            Error("AUTHENTICATION_REQUIRED", "you must be authenticated to access this resource"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )
    return user


async def require_activated_user(
    user: CurrentUser = Depends(require_authenticated_user),
) -> CurrentUser:
    if not user.activated:
        raise ClientError(
            Error("INACTIVE_ACCOUNT", "your user account must be activated to access this resource"),
            status_code=status.HTTP_403_FORBIDDEN,
        )
    return user


def require_permission(code: str):
    """
    Build a dependency that admits activated users holding ``code``.

    Permissions are read from the database on every request.
    """

    async def permission_gate(
        user: CurrentUser = Depends(require_activated_user),
        uow: UnitOfWork = Depends(get_unit_of_work),
    ) -> CurrentUser:
        async with uow:
            permissions = await uow.permissions.get_all_for_user(user.id)

        if not permissions.includes(code):
            raise ClientError(
                Error(
                    "NOT_PERMITTED",
                    "your user account doesn't have the necessary permissions to access this resource",
                ),
                status_code=status.HTTP_403_FORBIDDEN,
            )
        return user

    return permission_gate
