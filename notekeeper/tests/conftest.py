from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient

from notekeeper.app import create_app
from notekeeper.container import Container
from notekeeper.domain.accounts.entities import Account, StoredCredentials
from notekeeper.domain.accounts.exceptions import DuplicateUsernameError
from notekeeper.domain.accounts.repositories import AccountStore
from notekeeper.shared.config import AppConfig, DatabaseConfig, HashingConfig, TokenConfig

TEST_SECRET = "test-signing-key-0123456789abcdef-0123456789"


class InMemoryAccountStore(AccountStore):
    def __init__(self) -> None:
        self.rows: list[dict] = []
        self._seq = 1
        self.calls: list[str] = []

    def _active(self, username: str) -> dict | None:
        for row in self.rows:
            if row["username"] == username and row["active"]:
                return row
        return None

    def find_by_username(self, username: str) -> Account | None:
        self.calls.append("find_by_username")
        row = self._active(username)
        return Account(id=row["id"], username=row["username"]) if row else None

    def find_by_id(self, account_id: int) -> Account | None:
        self.calls.append("find_by_id")
        for row in self.rows:
            if row["id"] == account_id and row["active"]:
                return Account(id=row["id"], username=row["username"])
        return None

    def find_by_credential_lookup(self, username: str) -> StoredCredentials | None:
        self.calls.append("find_by_credential_lookup")
        row = self._active(username)
        if row is None:
            return None
        return StoredCredentials(
            account_id=row["id"], username=row["username"], password_hash=row["password_hash"]
        )

    def insert(self, username: str, password_hash: str) -> int:
        self.calls.append("insert")
        if self._active(username):
            raise DuplicateUsernameError()
        row = {
            "id": self._seq,
            "username": username,
            "password_hash": password_hash,
            "active": True,
        }
        self._seq += 1
        self.rows.append(row)
        return row["id"]

    def update_password_hash(self, username: str, password_hash: str) -> None:
        self.calls.append("update_password_hash")
        row = self._active(username)
        if row:
            row["password_hash"] = password_hash

    def deactivate(self, username: str) -> None:
        self.calls.append("deactivate")
        row = self._active(username)
        if row:
            row["active"] = False


@pytest.fixture()
def account_store() -> InMemoryAccountStore:
    return InMemoryAccountStore()


@pytest.fixture()
def app_config(tmp_path: Path) -> AppConfig:
    return AppConfig(
        app_env="test",
        secret_key=TEST_SECRET,
        database=DatabaseConfig(url=f"sqlite:///{tmp_path / 'notekeeper.db'}"),
        token=TokenConfig(algorithm="HS256", ttl_seconds=600),
        hashing=HashingConfig(bcrypt_rounds=4),
    )


@pytest.fixture()
def app(app_config: AppConfig) -> Iterator[Flask]:
    flask_app = create_app(app_config, configure_logging=False)
    yield flask_app
    container: Container = flask_app.extensions["notekeeper"]
    container.close()


@pytest.fixture()
def container(app: Flask) -> Container:
    return app.extensions["notekeeper"]


@pytest.fixture()
def client(app: Flask) -> Iterator[FlaskClient]:
    with app.test_client() as test_client:
        yield test_client
