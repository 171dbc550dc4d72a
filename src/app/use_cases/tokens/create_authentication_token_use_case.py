"""
Create Authentication Token Use Case

Exchanges an email and password for a bearer token.
"""

from datetime import timedelta

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.validation import validation_error
from src.domain.entities import TokenScope
from src.domain.password import DUMMY_HASH, Password
from src.domain.validation import validate_email, validate_password_plaintext
from src.domain.validator import Validator
from src.libs.result import Error, Result, Return
from .dtos import AuthenticationTokenInfo, AuthenticationTokenResponse


class CreateAuthenticationTokenUseCase:
    """
    Use case for logging in.

    Business Rules:
    - Unknown email and wrong password give the same INVALID_CREDENTIALS
    - Unactivated users may authenticate; activation is enforced per route
    - The token expires after the configured TTL
    """

    def __init__(self, uow: UnitOfWork, ttl: timedelta):
        self.uow = uow
        self.ttl = ttl

    async def execute(self, email: str, password: str) -> Result[AuthenticationTokenResponse]:
        v = Validator()
        validate_email(v, email)
        validate_password_plaintext(v, password)
        if not v.valid():
            return Return.err(validation_error(v))

        async with self.uow:
            user = await self.uow.users.get_by_email(email)
            if user is None:
                Password(DUMMY_HASH).matches(password)
                return Return.err(Error("INVALID_CREDENTIALS", "invalid authentication credentials"))

            if not Password(user.password_hash).matches(password):
                return Return.err(Error("INVALID_CREDENTIALS", "invalid authentication credentials"))

            token = await self.uow.tokens.new(user.id, self.ttl, TokenScope.authentication)

            await self.uow.commit()

        return Return.ok(
            AuthenticationTokenResponse(
                authentication_token=AuthenticationTokenInfo(token=token.plaintext, expiry=token.expiry)
            )
        )
