"""
User Use Cases

Registration, activation and credential management.
"""

from .register_user_use_case import RegisterUserUseCase
from .activate_user_use_case import ActivateUserUseCase
from .change_password_use_case import ChangePasswordUseCase
from .dtos import (
    ChangePasswordCommand,
    MessageResponse,
    RegisterUserCommand,
    UserInfo,
    UserResponse,
)

__all__ = [
    # Use Cases
    "RegisterUserUseCase",
    "ActivateUserUseCase",
    "ChangePasswordUseCase",
    # DTOs - Commands
    "RegisterUserCommand",
    "ChangePasswordCommand",
    # DTOs - Responses
    "UserResponse",
    "MessageResponse",
    # DTOs - Nested Models
    "UserInfo",
]
