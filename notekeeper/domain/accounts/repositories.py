# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import Account, SessionToken, StoredCredentials


class AccountStore(Protocol):
    """Persistence port for accounts. Every read excludes deactivated rows."""

    def find_by_username(self, username: str) -> Account | None: ...
    def find_by_id(self, account_id: int) -> Account | None: ...
    def find_by_credential_lookup(self, username: str) -> StoredCredentials | None: ...
    def insert(self, username: str, password_hash: str) -> int: ...
    def update_password_hash(self, username: str, password_hash: str) -> None: ...
    def deactivate(self, username: str) -> None: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...


class TokenIssuer(Protocol):
    def issue(self, account_id: int, username: str) -> SessionToken: ...
