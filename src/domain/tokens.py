"""
Token generation.

A token's plaintext is 16 bytes from the OS CSPRNG, base32 encoded without
padding (26 characters). Only the SHA-256 hex digest of the plaintext is
persisted.
"""

import base64
import hashlib
import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta

from src.domain.base import utcnow
from src.domain.entities import Token, TokenScope

TOKEN_ENTROPY_BYTES = 16
TOKEN_PLAINTEXT_LENGTH = 26


@dataclass
class IssuedToken:
    """A freshly minted token; the only place the plaintext exists."""

    plaintext: str
    hash: str
    user_id: int
    expiry: datetime
    scope: TokenScope

    def to_entity(self) -> Token:
        return Token(
            hash=self.hash,
            user_id=self.user_id,
            expiry=self.expiry,
            scope=self.scope,
        )


def hash_token(plaintext: str) -> str:
    return hashlib.sha256(plaintext.encode("utf-8")).hexdigest()


def generate_token(user_id: int, ttl: timedelta, scope: TokenScope) -> IssuedToken:
    random_bytes = secrets.token_bytes(TOKEN_ENTROPY_BYTES)
    plaintext = base64.b32encode(random_bytes).decode("ascii").rstrip("=")

    return IssuedToken(
        plaintext=plaintext,
        hash=hash_token(plaintext),
        user_id=user_id,
        expiry=utcnow() + ttl,
        scope=scope,
    )
