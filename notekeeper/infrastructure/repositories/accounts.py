# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from notekeeper.domain.accounts.entities import Account, StoredCredentials
from notekeeper.domain.accounts.exceptions import DuplicateUsernameError
from notekeeper.domain.accounts.repositories import AccountStore
from notekeeper.infrastructure.db.models import AccountRow
from notekeeper.infrastructure.unit_of_work import store_errors, unit_of_work_scope


def _to_domain(row: AccountRow) -> Account:
    return Account(
        id=row.id,
        username=row.username,
        active=bool(row.active),
        created_at=row.created_at,
    )


class SqlAlchemyAccountStore(AccountStore):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def find_by_username(self, username: str) -> Account | None:
        with store_errors("find_by_username"):
            with unit_of_work_scope(self._session_factory) as session:
                row = session.scalars(
                    select(AccountRow).where(
                        AccountRow.username == username,
                        AccountRow.active.is_(True),
                    )
                ).first()
                return _to_domain(row) if row else None

    def find_by_id(self, account_id: int) -> Account | None:
        with store_errors("find_by_id"):
            with unit_of_work_scope(self._session_factory) as session:
                row = session.scalars(
                    select(AccountRow).where(
                        AccountRow.id == account_id,
                        AccountRow.active.is_(True),
                    )
                ).first()
                return _to_domain(row) if row else None

    def find_by_credential_lookup(self, username: str) -> StoredCredentials | None:
        with store_errors("find_by_credential_lookup"):
            with unit_of_work_scope(self._session_factory) as session:
                row = session.execute(
                    select(AccountRow.id, AccountRow.username, AccountRow.password_hash).where(
                        AccountRow.username == username,
                        AccountRow.active.is_(True),
                    )
                ).first()
                if row is None:
                    return None
                return StoredCredentials(
                    account_id=row.id,
                    username=row.username,
                    password_hash=row.password_hash,
                )

    def insert(self, username: str, password_hash: str) -> int:
        with store_errors("insert"):
            try:
                with unit_of_work_scope(self._session_factory) as session:
                    row = AccountRow(username=username, password_hash=password_hash)
                    session.add(row)
                    session.flush()
                    return row.id
            except IntegrityError as exc:
                raise DuplicateUsernameError() from exc

    def update_password_hash(self, username: str, password_hash: str) -> None:
        with store_errors("update_password_hash"):
            with unit_of_work_scope(self._session_factory) as session:
                session.execute(
                    update(AccountRow)
                    .where(AccountRow.username == username, AccountRow.active.is_(True))
                    .values(password_hash=password_hash)
                )

    def deactivate(self, username: str) -> None:
        with store_errors("deactivate"):
            with unit_of_work_scope(self._session_factory) as session:
                session.execute(
                    update(AccountRow)
                    .where(AccountRow.username == username, AccountRow.active.is_(True))
                    .values(active=False)
                )
