"""
Password hashing and access token issuing.

Passwords are stored as a single unsalted SHA-256 pass, so equal passwords
share a digest. Tokens are a fixed header string followed by the raw user id;
they are neither signed nor ever validated.
"""

import hashlib
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

DEFAULT_TOKEN_PREFIX = "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9."


class PasswordHasher:
    """Deterministic one-way transform from plaintext to stored digest."""

    def hash(self, password: str) -> str:
        """Return the hex-encoded SHA-256 digest of ``password``."""
        return hashlib.sha256(password.encode("utf-8")).hexdigest()

    def verify(self, password: str, password_hash: str) -> bool:
        """Recompute the digest and compare it to the stored one."""
        return self.hash(password) == password_hash


@dataclass(frozen=True)
class IssuedToken:
    token: str
    expires_at: int  # unix seconds


class TokenIssuer:
    """Maps a user id to an opaque bearer string."""

    def __init__(self, prefix: str = DEFAULT_TOKEN_PREFIX, expire_minutes: int = 60):
        self.prefix = prefix
        self.expire_minutes = expire_minutes

    def issue(self, user_id: str) -> IssuedToken:
        """
        Issue a token for ``user_id``.

        Args:
            user_id: Identifier of the authenticated user

        Returns:
            Token string and its nominal expiry
        """
        expires = datetime.now(timezone.utc) + timedelta(minutes=self.expire_minutes)
        return IssuedToken(token=self.prefix + user_id, expires_at=int(expires.timestamp()))
