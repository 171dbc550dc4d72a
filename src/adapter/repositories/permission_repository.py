from sqlmodel import select

from src.adapter.repositories.base import SqlRepository
from src.app.repositories.permission_repository import IPermissionRepository
from src.domain.entities import Permission, UserPermission
from src.domain.permissions import Permissions


class PermissionRepository(SqlRepository, IPermissionRepository):
    """Permission repository implementation using SQLModel"""

    async def get_all_for_user(self, user_id: int) -> Permissions:
        """Get the permission codes currently granted to a user"""
        stmt = (
            select(Permission.code)
            .join(UserPermission, UserPermission.permission_id == Permission.id)
            .where(UserPermission.user_id == user_id)
        )
        result = await self._exec(stmt)
        return Permissions(result.all())

    async def add_for_user(self, user_id: int, *codes: str) -> None:
        """
        Grant permission codes to a user.

        Codes that do not exist yet are created. Codes the user already
        holds are skipped.
        """
        if not codes:
            return

        result = await self._exec(select(Permission).where(Permission.code.in_(codes)))
        known = {permission.code: permission for permission in result.all()}

        for code in set(codes) - set(known):
            permission = Permission(code=code)
            self.session.add(permission)
            known[code] = permission
        await self._flush(*known.values())

        result = await self._exec(
            select(UserPermission.permission_id).where(UserPermission.user_id == user_id)
        )
        granted = set(result.all())

        for permission in known.values():
            if permission.id not in granted:
                self.session.add(UserPermission(user_id=user_id, permission_id=permission.id))
        await self._flush()
