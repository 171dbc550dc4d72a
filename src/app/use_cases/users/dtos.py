"""
User Use Case DTOs (Data Transfer Objects)

Command and Response classes for the users domain.
"""

from datetime import datetime

from pydantic import BaseModel

from src.domain.entities import User


# ============================================================================
# Command DTOs
# ============================================================================


class RegisterUserCommand(BaseModel):
    """Registration input"""

    name: str
    email: str
    password: str


class ChangePasswordCommand(BaseModel):
    """Password change input"""

    current_password: str
    new_password: str


# ============================================================================
# Response DTOs
# ============================================================================


class UserInfo(BaseModel):
    """Public view of a user; never carries the password hash"""

    id: int
    created_at: datetime
    name: str
    email: str
    activated: bool

    @classmethod
    def from_user(cls, user: User) -> "UserInfo":
        return cls(
            id=user.id,
            created_at=user.created_at,
            name=user.name,
            email=user.email,
            activated=user.activated,
        )


class UserResponse(BaseModel):
    """Response wrapping a single user"""

    user: UserInfo


class MessageResponse(BaseModel):
    """Response carrying only a message"""

    message: str
