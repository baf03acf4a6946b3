from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from sqlalchemy import select
from sqlalchemy.exc import OperationalError

from notekeeper.application.results import Result
from notekeeper.domain.accounts.exceptions import DuplicateUsernameError, StoreUnavailableError
from notekeeper.infrastructure.db import AccountRow, Database
from notekeeper.infrastructure.repositories import SqlAlchemyAccountStore
from notekeeper.shared.config import DatabaseConfig


@pytest.fixture()
def database(tmp_path: Path) -> Iterator[Database]:
    db = Database(DatabaseConfig(url=f"sqlite:///{tmp_path / 'store.db'}"))
    db.create_all()
    yield db
    db.dispose()


@pytest.fixture()
def store(database: Database) -> SqlAlchemyAccountStore:
    return SqlAlchemyAccountStore(database.session_factory)


def test_insert_and_lookup(store: SqlAlchemyAccountStore) -> None:
    account_id = store.insert("alice12", "$2b$04$digest")

    account = store.find_by_username("alice12")
    credentials = store.find_by_credential_lookup("alice12")

    assert account is not None and account.id == account_id and account.active
    assert credentials is not None
    assert credentials.password_hash == "$2b$04$digest"
    assert "digest" not in repr(credentials)


def test_insert_duplicate_active_username(store: SqlAlchemyAccountStore) -> None:
    store.insert("alice12", "hash-1")

    with pytest.raises(DuplicateUsernameError):
        store.insert("alice12", "hash-2")


def test_deactivated_rows_are_tombstones(
    store: SqlAlchemyAccountStore, database: Database
) -> None:
    account_id = store.insert("alice12", "hash-1")

    store.deactivate("alice12")
    store.deactivate("alice12")

    assert store.find_by_username("alice12") is None
    assert store.find_by_credential_lookup("alice12") is None
    assert store.find_by_id(account_id) is None
    with database.session_scope() as session:
        row = session.scalars(select(AccountRow).where(AccountRow.id == account_id)).one()
        assert row.active is False


def test_username_reusable_after_deactivation(store: SqlAlchemyAccountStore) -> None:
    first = store.insert("alice12", "hash-1")
    store.deactivate("alice12")

    second = store.insert("alice12", "hash-2")

    assert second != first
    credentials = store.find_by_credential_lookup("alice12")
    assert credentials is not None and credentials.account_id == second


def test_update_password_hash(store: SqlAlchemyAccountStore) -> None:
    store.insert("alice12", "hash-1")

    store.update_password_hash("alice12", "hash-2")
    store.update_password_hash("ghost_user", "hash-3")

    credentials = store.find_by_credential_lookup("alice12")
    assert credentials is not None and credentials.password_hash == "hash-2"
    assert store.find_by_username("ghost_user") is None


def test_lookup_values_are_bound_parameters(store: SqlAlchemyAccountStore) -> None:
    store.insert("alice12", "hash-1")

    assert store.find_by_username("alice12' OR '1'='1") is None
    assert store.find_by_credential_lookup("' OR 1=1 --") is None


def test_backend_failure_maps_to_store_unavailable() -> None:
    def broken_factory():
        raise OperationalError("SELECT 1", {}, Exception("connection refused"))

    store = SqlAlchemyAccountStore(broken_factory)

    with pytest.raises(StoreUnavailableError) as excinfo:
        store.find_by_username("alice12")

    assert excinfo.value.status == 503
    assert "SELECT" not in str(Result.from_error(excinfo.value).to_dict())
