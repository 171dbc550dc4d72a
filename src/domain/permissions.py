from typing import Iterable


class Permissions(frozenset):
    """Set of permission codes held by a user."""

    def __new__(cls, codes: Iterable[str] = ()):
        return super().__new__(cls, codes)

    def includes(self, code: str) -> bool:
        return code in self
