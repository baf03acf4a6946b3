# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from notekeeper.domain.notes.entities import Note
from notekeeper.domain.notes.repositories import NoteStore
from notekeeper.infrastructure.db.models import NoteRow
from notekeeper.infrastructure.unit_of_work import store_errors, unit_of_work_scope


def _to_domain(row: NoteRow) -> Note:
    return Note(
        id=row.id,
        account_id=row.account_id,
        title=row.title,
        content=row.content,
        active=bool(row.active),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class SqlAlchemyNoteStore(NoteStore):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def insert(self, account_id: int, title: str, content: str) -> Note:
        with store_errors("notes.insert"):
            with unit_of_work_scope(self._session_factory) as session:
                row = NoteRow(account_id=account_id, title=title, content=content)
                session.add(row)
                session.flush()
                session.refresh(row)
                return _to_domain(row)

    def find_by_id(self, note_id: int) -> Note | None:
        with store_errors("notes.find_by_id"):
            with unit_of_work_scope(self._session_factory) as session:
                row = session.scalars(
                    select(NoteRow).where(NoteRow.id == note_id, NoteRow.active.is_(True))
                ).first()
                return _to_domain(row) if row else None

    def update(self, note_id: int, title: str, content: str) -> None:
        with store_errors("notes.update"):
            with unit_of_work_scope(self._session_factory) as session:
                session.execute(
                    update(NoteRow)
                    .where(NoteRow.id == note_id, NoteRow.active.is_(True))
                    .values(title=title, content=content)
                )

    def deactivate(self, note_id: int) -> None:
        with store_errors("notes.deactivate"):
            with unit_of_work_scope(self._session_factory) as session:
                session.execute(
                    update(NoteRow)
                    .where(NoteRow.id == note_id, NoteRow.active.is_(True))
                    .values(active=False)
                )
