# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from notekeeper.domain.accounts.exceptions import AccountNotFoundError
from notekeeper.domain.accounts.repositories import AccountStore
from notekeeper.domain.notes.entities import MAX_ROW_ID, Note
from notekeeper.domain.notes.exceptions import NoteNotFoundError
from notekeeper.domain.notes.repositories import NoteStore
from notekeeper.shared.logging import logger


def _storable(row_id: int) -> bool:
    return 1 <= row_id <= MAX_ROW_ID


class NotesService:
    def __init__(self, *, notes: NoteStore, accounts: AccountStore) -> None:
        self._notes = notes
        self._accounts = accounts

    def create_note(self, account_id: int, title: str, content: str) -> Note:
        if not _storable(account_id) or self._accounts.find_by_id(account_id) is None:
            raise AccountNotFoundError(context={"account_id": account_id})
        note = self._notes.insert(account_id, title, content)
        logger.info(f"notes.create: ok note_id={note.id} account_id={account_id}")
        return note

    def read_note(self, note_id: int) -> Note:
        note = self._notes.find_by_id(note_id) if _storable(note_id) else None
        if note is None:
            raise NoteNotFoundError(note_id)
        return note

    def update_note(self, note_id: int, title: str, content: str) -> None:
        if _storable(note_id):
            self._notes.update(note_id, title, content)
        logger.info(f"notes.update: ok note_id={note_id}")

    def delete_note(self, note_id: int) -> None:
        if _storable(note_id):
            self._notes.deactivate(note_id)
        logger.info(f"notes.delete: ok note_id={note_id}")
