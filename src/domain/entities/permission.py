"""
Permission Entities

Capability codes and their association with users.
"""

from typing import Optional

from sqlmodel import Field, SQLModel


class Permission(SQLModel, table=True):
    """
    Permission entity - a capability code such as ``records:read``.

    Business Rules:
    - Codes are unique, exact-match strings
    - No hierarchy: holding ``records:write`` does not imply ``records:read``
    """

    __tablename__ = "permissions"

    id: Optional[int] = Field(default=None, primary_key=True)
    code: str = Field(unique=True, index=True, max_length=100)


class UserPermission(SQLModel, table=True):
    """Join row granting a permission to a user"""

    __tablename__ = "users_permissions"

    user_id: int = Field(foreign_key="users.id", primary_key=True)
    permission_id: int = Field(foreign_key="permissions.id", primary_key=True)
