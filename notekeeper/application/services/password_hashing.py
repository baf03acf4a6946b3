# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Password hashing strategies."""

from __future__ import annotations

import bcrypt

from notekeeper.domain.accounts.exceptions import HashingFailureError
from notekeeper.domain.accounts.repositories import PasswordHasher
from notekeeper.shared.logging import logger

# bcrypt only looks at the first 72 bytes of its input
BCRYPT_MAX_BYTES = 72


class BcryptPasswordHasher(PasswordHasher):
    def __init__(self, rounds: int = 12) -> None:
        self._rounds = rounds

    def hash(self, password: str) -> str:
        secret = self._encode(password)
        try:
            digest = bcrypt.hashpw(secret, bcrypt.gensalt(rounds=self._rounds))
        except (ValueError, TypeError) as exc:
            logger.error(f"password_hashing: bcrypt rejected input ({type(exc).__name__})")
            raise HashingFailureError() from exc
        return digest.decode("ascii")

    def verify(self, password: str, hashed: str) -> bool:
        secret = self._encode(password)
        try:
            return bool(bcrypt.checkpw(secret, hashed.encode("ascii")))
        except (ValueError, TypeError, UnicodeEncodeError):
            # malformed stored digest; treated as a mismatch
            logger.warning("password_hashing: stored digest is not a valid bcrypt hash")
            return False

    @staticmethod
    def _encode(password: str) -> bytes:
        try:
            secret = password.encode("utf-8")
        except (AttributeError, UnicodeEncodeError) as exc:
            raise HashingFailureError() from exc
        if len(secret) > BCRYPT_MAX_BYTES:
            raise HashingFailureError()
        return secret
