from abc import ABC, abstractmethod

from src.domain.permissions import Permissions


class IPermissionRepository(ABC):
    """Permission repository interface - application layer"""

    @abstractmethod
    async def get_all_for_user(self, user_id: int) -> Permissions:
        """Get the permission codes currently granted to a user"""
        pass

    @abstractmethod
    async def add_for_user(self, user_id: int, *codes: str) -> None:
        """Grant permission codes to a user; existing grants are left as they are"""
        pass
