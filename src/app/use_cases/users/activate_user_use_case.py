"""
Activate User Use Case

Consumes an activation token and marks its owner as activated.
"""

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.validation import validation_error
from src.domain.entities import TokenScope
from src.domain.errors import EditConflictError
from src.domain.validation import validate_token_plaintext
from src.domain.validator import Validator
from src.libs.result import Error, Result, Return
from .dtos import UserInfo, UserResponse


class ActivateUserUseCase:
    """
    Use case for account activation.

    Business Rules:
    - Token must be 26 characters, unexpired and of activation scope
    - Unknown, expired and wrong-scope tokens are reported the same way
    - Activation and deletion of the user's activation tokens commit together
    - A concurrent change to the user yields EDIT_CONFLICT
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, token: str) -> Result[UserResponse]:
        v = Validator()
        validate_token_plaintext(v, token)
        if not v.valid():
            return Return.err(validation_error(v))

        async with self.uow:
            user = await self.uow.users.get_for_token(TokenScope.activation, token)
            if user is None:
                v.add_error("token", "invalid or expired activation token")
                return Return.err(validation_error(v))

            user.activated = True
            try:
                user = await self.uow.users.update(user)
            except EditConflictError:
                return Return.err(
                    Error(
                        "EDIT_CONFLICT",
                        "unable to update the record due to an edit conflict, please try again",
                    )
                )

            await self.uow.tokens.delete_all_for_user(TokenScope.activation, user.id)

            await self.uow.commit()

            return Return.ok(UserResponse(user=UserInfo.from_user(user)))
