# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Signed session tokens."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Any

import jwt

from notekeeper.domain.accounts.entities import SessionToken
from notekeeper.domain.accounts.repositories import TokenIssuer


def _utcnow() -> datetime:
    return datetime.now(UTC)


class JwtTokenIssuer(TokenIssuer):
    """Mints HMAC-signed JWTs carrying ``id`` and ``username`` claims.

    The key is handed in from configuration; the issuer never creates one.
    Tokens expire after ``ttl``.
    """

    def __init__(
        self,
        *,
        secret_key: str,
        algorithm: str = "HS256",
        ttl: timedelta = timedelta(hours=1),
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        if not secret_key:
            raise ValueError("secret_key must not be empty")
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._ttl = ttl
        self._clock = clock

    def issue(self, account_id: int, username: str) -> SessionToken:
        issued_at = self._clock().replace(microsecond=0)
        expires_at = issued_at + self._ttl
        claims = {
            "id": int(account_id),
            "username": username,
            "iat": int(issued_at.timestamp()),
            "exp": int(expires_at.timestamp()),
        }
        token = jwt.encode(claims, self._secret_key, algorithm=self._algorithm)
        return SessionToken(
            token=token,
            account_id=int(account_id),
            username=username,
            issued_at=issued_at,
            expires_at=expires_at,
        )

    def decode(self, token: str) -> dict[str, Any]:
        """Verify signature and expiry; raises ``jwt.InvalidTokenError``."""
        return jwt.decode(
            token,
            self._secret_key,
            algorithms=[self._algorithm],
            options={"require": ["exp", "iat"]},
        )
