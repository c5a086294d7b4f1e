"""
Credential hashing.

Wraps passlib's bcrypt handler behind a single class so both operations
share one configured context. `hash` logs and swallows failures (callers
get None); `compare` lets failures propagate. The asymmetry is relied on
by existing callers and lives only here.
"""

import asyncio
import logging
from typing import Optional

from passlib.context import CryptContext

logger = logging.getLogger(__name__)

DEFAULT_ROUNDS = 10


class CredentialHasher:
    """Salted adaptive password hashing with a fixed work factor."""

    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        self._context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

    async def hash(self, plaintext: Optional[str]) -> Optional[str]:
        """
        Hash a plaintext password.

        Returns:
            The encoded hash, or None if hashing failed.
        """
        try:
            return await asyncio.to_thread(self._context.hash, plaintext)
        except Exception as e:
            logger.error("Password hashing failed: %r", e)
            return None

    async def compare(self, plaintext: str, hashed: str) -> bool:
        """
        Check a plaintext password against a stored hash.

        Raises:
            Whatever the underlying primitive raises for malformed input.
        """
        return await asyncio.to_thread(self._context.verify, plaintext, hashed)
