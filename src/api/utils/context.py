"""
Request-scoped identity.

The authentication dependency stores a ``CurrentUser`` on
``request.state.user``. A request without credentials carries
``ANONYMOUS_USER`` rather than nothing at all.
"""

from typing import Optional

from fastapi import Request
from pydantic import BaseModel

from src.domain.entities import User


class CurrentUser(BaseModel):
    id: Optional[int] = None
    name: str = ""
    email: str = ""
    activated: bool = False

    @property
    def is_anonymous(self) -> bool:
        return self.id is None

    @classmethod
    def from_user(cls, user: User) -> "CurrentUser":
        return cls(id=user.id, name=user.name, email=user.email, activated=user.activated)


ANONYMOUS_USER = CurrentUser()


def set_current_user(request: Request, user: CurrentUser) -> None:
    request.state.user = user


def get_request_user(request: Request) -> CurrentUser:
    return getattr(request.state, "user", ANONYMOUS_USER)
