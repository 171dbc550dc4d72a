"""
Change Password Use Case

Rotates a user's password and revokes every authentication token they hold.
"""

import logging

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.validation import validation_error
from src.domain.entities import TokenScope
from src.domain.errors import EditConflictError
from src.domain.password import Password
from src.domain.validation import validate_password_plaintext
from src.domain.validator import Validator
from src.libs.result import Error, Result, Return
from .dtos import ChangePasswordCommand, MessageResponse

logger = logging.getLogger(__name__)


class ChangePasswordUseCase:
    """
    Use case for changing a password.

    Business Rules:
    - Current password must match
    - New password must be 8 to 72 bytes
    - All authentication tokens of the user are deleted, including the one
      used for this request
    - Password update and token revocation commit together
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: int, command: ChangePasswordCommand) -> Result[MessageResponse]:
        v = Validator()
        validate_password_plaintext(v, command.new_password, key="new_password")
        if not v.valid():
            return Return.err(validation_error(v))

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "the requested resource could not be found"))

            if not Password(user.password_hash).matches(command.current_password):
                return Return.err(Error("INVALID_CREDENTIALS", "invalid authentication credentials"))

            password = Password()
            password.set(command.new_password)
            user.password_hash = password.hash

            try:
                await self.uow.users.update(user)
            except EditConflictError:
                return Return.err(
                    Error(
                        "EDIT_CONFLICT",
                        "unable to update the record due to an edit conflict, please try again",
                    )
                )

            revoked = await self.uow.tokens.delete_all_for_user(TokenScope.authentication, user_id)

            await self.uow.commit()

        logger.info(f"Password changed for user {user_id}, revoked {revoked} token(s)")

        return Return.ok(
            MessageResponse(message="your password was updated; please authenticate again")
        )
