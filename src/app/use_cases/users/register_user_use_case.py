"""
Register User Use Case

Creates an unactivated user and emails an activation token.
"""

import logging
from datetime import timedelta
from typing import Sequence

from src.app.services.background import BackgroundRunner
from src.app.services.mailer import Mailer
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.validation import validation_error
from src.domain.entities import TokenScope, User
from src.domain.errors import DuplicateEmailError
from src.domain.password import Password
from src.domain.validation import validate_user
from src.domain.validator import Validator
from src.libs.result import Result, Return
from .dtos import RegisterUserCommand, UserInfo, UserResponse

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """
    Register User Use Case

    Business Logic:
    1. Validate name, email and password
    2. Hash password with bcrypt cost factor 12
    3. Insert User with activated=False (duplicate email -> field error)
    4. Grant the default permissions
    5. Issue an activation token
    6. Commit transaction atomically
    7. Send the welcome email in the background
    """

    def __init__(
        self,
        uow: UnitOfWork,
        mailer: Mailer,
        background: BackgroundRunner,
        activation_ttl: timedelta,
        default_permissions: Sequence[str] = (),
    ):
        self.uow = uow
        self.mailer = mailer
        self.background = background
        self.activation_ttl = activation_ttl
        self.default_permissions = default_permissions

    async def execute(self, command: RegisterUserCommand) -> Result[UserResponse]:
        """
        Execute registration

        Returns:
            Result[UserResponse] with the new user,
            or Error(VALIDATION_FAILED) for bad input or a taken email
        """
        v = Validator()
        validate_user(v, command.name, command.email, command.password)
        if not v.valid():
            return Return.err(validation_error(v))

        password = Password()
        password.set(command.password)

        async with self.uow:
            user = User(
                name=command.name,
                email=command.email,
                password_hash=password.hash,
                activated=False,
            )
            try:
                user = await self.uow.users.insert(user)
            except DuplicateEmailError:
                v.add_error("email", "a user with this email already exists")
                return Return.err(validation_error(v))

            if self.default_permissions:
                await self.uow.permissions.add_for_user(user.id, *self.default_permissions)

            token = await self.uow.tokens.new(user.id, self.activation_ttl, TokenScope.activation)

            await self.uow.commit()

            response = UserResponse(user=UserInfo.from_user(user))

        logger.info(f"Registered user {response.user.id}")

        # Response goes out before the email does
        self.background.run(
            self.mailer.send,
            response.user.email,
            "user_welcome.html",
            {
                "activation_token": token.plaintext,
                "user_id": response.user.id,
                "expires_in_hours": int(self.activation_ttl.total_seconds() // 3600),
            },
        )

        return Return.ok(response)
