"""
Password credential.

Wraps a bcrypt hash. The plaintext is only ever held in memory on the
instance that set it and is never persisted.
"""

from typing import Optional

import bcrypt

from src.domain.errors import PasswordComparisonError

BCRYPT_COST = 12

# Compared against when no user exists, so a miss costs as much as a wrong password
DUMMY_HASH = bcrypt.gensalt(BCRYPT_COST).decode("utf-8")


class Password:
    def __init__(self, hash: Optional[str] = None):
        self.hash = hash
        self.plaintext: Optional[str] = None

    def set(self, plaintext: str) -> None:
        hashed = bcrypt.hashpw(plaintext.encode("utf-8"), bcrypt.gensalt(BCRYPT_COST))
        self.hash = hashed.decode("utf-8")
        self.plaintext = plaintext

    def matches(self, candidate: str) -> bool:
        """
        Check a candidate plaintext against the stored hash.

        Raises:
            PasswordComparisonError: no hash is set or the stored hash is malformed
        """
        if self.hash is None:
            raise PasswordComparisonError("no password hash set")
        try:
            return bcrypt.checkpw(candidate.encode("utf-8"), self.hash.encode("utf-8"))
        except ValueError as exc:
            raise PasswordComparisonError(str(exc)) from exc
