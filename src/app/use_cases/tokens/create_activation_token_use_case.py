"""
Create Activation Token Use Case

Sends a fresh activation token to a user whose first one was lost or expired.
"""

from datetime import timedelta

from src.app.services.background import BackgroundRunner
from src.app.services.mailer import Mailer
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.users.dtos import MessageResponse
from src.app.use_cases.validation import validation_error
from src.domain.entities import TokenScope
from src.domain.validation import validate_email
from src.domain.validator import Validator
from src.libs.result import Result, Return

SENT_MESSAGE = "if the account exists and is not yet activated, an email will be sent to you containing activation instructions"


class CreateActivationTokenUseCase:
    """
    Use case for re-sending activation instructions.

    Business Rules:
    - Earlier activation tokens of the user are deleted (superseded)
    - Unknown and already activated emails get the same response and no
      email (no enumeration)
    """

    def __init__(
        self,
        uow: UnitOfWork,
        mailer: Mailer,
        background: BackgroundRunner,
        ttl: timedelta,
    ):
        self.uow = uow
        self.mailer = mailer
        self.background = background
        self.ttl = ttl

    async def execute(self, email: str) -> Result[MessageResponse]:
        v = Validator()
        validate_email(v, email)
        if not v.valid():
            return Return.err(validation_error(v))

        async with self.uow:
            user = await self.uow.users.get_by_email(email)
            if user is None or user.activated:
                return Return.ok(MessageResponse(message=SENT_MESSAGE))

            user_id, recipient = user.id, user.email

            await self.uow.tokens.delete_all_for_user(TokenScope.activation, user_id)
            token = await self.uow.tokens.new(user_id, self.ttl, TokenScope.activation)

            await self.uow.commit()

        self.background.run(
            self.mailer.send,
            recipient,
            "token_activation.html",
            {
                "activation_token": token.plaintext,
                "expires_in_hours": int(self.ttl.total_seconds() // 3600),
            },
        )

        return Return.ok(MessageResponse(message=SENT_MESSAGE))
