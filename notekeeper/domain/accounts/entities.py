# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(slots=True, frozen=True)
class Account:

    id: int
    username: str
    active: bool = True
    created_at: datetime | None = None

    def to_public(self) -> dict[str, Any]:
        return {"id": self.id, "username": self.username}


@dataclass(slots=True, frozen=True)
class StoredCredentials:
    """Digest row returned by the credential lookup; never leaves the service."""

    account_id: int
    username: str
    password_hash: str

    def __repr__(self) -> str:
        return f"StoredCredentials(account_id={self.account_id}, username={self.username!r})"


@dataclass(slots=True, frozen=True)
class SessionToken:

    token: str
    account_id: int
    username: str
    issued_at: datetime
    expires_at: datetime
