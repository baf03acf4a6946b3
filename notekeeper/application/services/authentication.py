# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

from notekeeper.domain.accounts.entities import Account, SessionToken
from notekeeper.domain.accounts.exceptions import (
    AccountNotFoundError,
    AuthenticationFailedError,
    InvalidCredentialFormatError,
)
from notekeeper.domain.accounts.repositories import AccountStore, PasswordHasher, TokenIssuer
from notekeeper.domain.accounts.validation import is_valid_username, validate_credentials
from notekeeper.shared.logging import logger

# compared against when the username is unknown, so both failure paths run one verify
_DUMMY_PASSWORD = "not-a-real-password"


class AuthenticationService:
    def __init__(
        self,
        *,
        accounts: AccountStore,
        password_hasher: PasswordHasher,
        token_issuer: TokenIssuer,
    ) -> None:
        self._accounts = accounts
        self._password_hasher = password_hasher
        self._token_issuer = token_issuer

    @cached_property
    def _dummy_hash(self) -> str:
        return self._password_hasher.hash(_DUMMY_PASSWORD)

    def register(self, username: str, password: str) -> int:
        if not validate_credentials(username, password):
            raise InvalidCredentialFormatError()

        hashed = self._password_hasher.hash(password)
        account_id = self._accounts.insert(username, hashed)
        logger.info(f"accounts.register: ok account_id={account_id}")
        return account_id

    def authenticate(self, username: str, password: str) -> SessionToken:
        if not validate_credentials(username, password):
            raise InvalidCredentialFormatError()

        stored = self._accounts.find_by_credential_lookup(username)
        if stored is None:
            self._password_hasher.verify(password, self._dummy_hash)
            raise AuthenticationFailedError()

        if not self._password_hasher.verify(password, stored.password_hash):
            raise AuthenticationFailedError()

        session = self._token_issuer.issue(stored.account_id, stored.username)
        logger.info(f"accounts.authenticate: ok account_id={stored.account_id}")
        return session

    def change_password(self, username: str, new_password: str) -> None:
        # No existence or old-password check; the update is a no-op for unknown names.
        hashed = self._password_hasher.hash(new_password)
        self._accounts.update_password_hash(username, hashed)
        logger.info(f"accounts.password_changed username={username}")

    def deactivate_account(self, username: str) -> None:
        self._accounts.deactivate(username)
        logger.info(f"accounts.deactivate: ok username={username}")

    def get_account(self, username: str) -> Account:
        account = self._accounts.find_by_username(username) if is_valid_username(username) else None
        if account is None:
            raise AccountNotFoundError()
        return account
