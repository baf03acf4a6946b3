# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Application dependency container."""

from __future__ import annotations

from datetime import timedelta
from functools import cached_property

from notekeeper.application.services.authentication import AuthenticationService
from notekeeper.application.services.notes import NotesService
from notekeeper.application.services.password_hashing import BcryptPasswordHasher
from notekeeper.application.services.token_issuer import JwtTokenIssuer
from notekeeper.infrastructure.db import Database
from notekeeper.infrastructure.repositories import SqlAlchemyAccountStore, SqlAlchemyNoteStore
from notekeeper.interfaces.http.controllers.accounts_controller import AccountsController
from notekeeper.interfaces.http.controllers.notes_controller import NotesController
from notekeeper.shared.config import AppConfig


class Container:
    def __init__(self, config: AppConfig) -> None:
        self._config = config

    @property
    def config(self) -> AppConfig:
        return self._config

    @cached_property
    def database(self) -> Database:
        return Database(self._config.database)

    @cached_property
    def password_hasher(self) -> BcryptPasswordHasher:
        return BcryptPasswordHasher(rounds=self._config.hashing.bcrypt_rounds)

    @cached_property
    def token_issuer(self) -> JwtTokenIssuer:
        return JwtTokenIssuer(
            secret_key=self._config.secret_key,
            algorithm=self._config.token.algorithm,
            ttl=timedelta(seconds=self._config.token.ttl_seconds),
        )

    @cached_property
    def account_store(self) -> SqlAlchemyAccountStore:
        return SqlAlchemyAccountStore(self.database.session_factory)

    @cached_property
    def note_store(self) -> SqlAlchemyNoteStore:
        return SqlAlchemyNoteStore(self.database.session_factory)

    @cached_property
    def auth_service(self) -> AuthenticationService:
        return AuthenticationService(
            accounts=self.account_store,
            password_hasher=self.password_hasher,
            token_issuer=self.token_issuer,
        )

    @cached_property
    def notes_service(self) -> NotesService:
        return NotesService(notes=self.note_store, accounts=self.account_store)

    @cached_property
    def accounts_controller(self) -> AccountsController:
        return AccountsController(auth_service=self.auth_service)

    @cached_property
    def notes_controller(self) -> NotesController:
        return NotesController(notes_service=self.notes_service)

    def close(self) -> None:
        if "database" in self.__dict__:
            self.database.dispose()
