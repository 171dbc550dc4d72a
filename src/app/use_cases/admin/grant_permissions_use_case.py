"""
Use Case: Grant Permissions

Operator endpoint to give a user extra capability codes, e.g.
``records:write``.
"""

from typing import List

from pydantic import BaseModel

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.validation import validation_error
from src.domain.validator import Validator, unique
from src.libs.result import Error, Result, Return


class GrantPermissionsResponse(BaseModel):
    """Response DTO for GrantPermissionsUseCase"""

    user_id: int
    permissions: List[str]


class GrantPermissionsUseCase:
    """
    Grant permission codes to a user.

    Business Logic:
    1. Validate the code list (non-empty, no duplicates, no blanks)
    2. Validate user exists
    3. Add the codes; codes already held are skipped
    4. Return the user's full permission set

    Idempotent: granting a held code again changes nothing
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: int, codes: List[str]) -> Result[GrantPermissionsResponse]:
        v = Validator()
        v.check(len(codes) > 0, "codes", "must contain at least 1 entry")
        v.check(unique(codes), "codes", "must not contain duplicate values")
        v.check(all(code.strip() for code in codes), "codes", "must not contain blank values")
        if not v.valid():
            return Return.err(validation_error(v))

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "the requested resource could not be found"))

            await self.uow.permissions.add_for_user(user_id, *codes)
            await self.uow.commit()

            permissions = await self.uow.permissions.get_all_for_user(user_id)

        return Return.ok(GrantPermissionsResponse(user_id=user_id, permissions=sorted(permissions)))
