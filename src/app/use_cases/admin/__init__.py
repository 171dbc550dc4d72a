"""Admin use cases for system administration operations."""

from .grant_permissions_use_case import GrantPermissionsUseCase, GrantPermissionsResponse

__all__ = [
    "GrantPermissionsUseCase",
    "GrantPermissionsResponse",
]
