from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from notekeeper.application.services.notes import NotesService
from notekeeper.domain.accounts.exceptions import AccountNotFoundError
from notekeeper.domain.notes.entities import Note
from notekeeper.domain.notes.exceptions import NoteNotFoundError
from notekeeper.domain.notes.repositories import NoteStore


class InMemoryNoteStore(NoteStore):
    def __init__(self) -> None:
        self.notes: dict[int, Note] = {}
        self._seq = 1

    def insert(self, account_id: int, title: str, content: str) -> Note:
        note = Note(id=self._seq, account_id=account_id, title=title, content=content)
        self.notes[note.id] = note
        self._seq += 1
        return note

    def find_by_id(self, note_id: int) -> Note | None:
        note = self.notes.get(note_id)
        return note if note and note.active else None

    def update(self, note_id: int, title: str, content: str) -> None:
        note = self.find_by_id(note_id)
        if note:
            self.notes[note_id] = Note(
                id=note.id, account_id=note.account_id, title=title, content=content
            )

    def deactivate(self, note_id: int) -> None:
        note = self.notes.get(note_id)
        if note:
            self.notes[note_id] = Note(
                id=note.id,
                account_id=note.account_id,
                title=note.title,
                content=note.content,
                active=False,
            )


@pytest.fixture()
def notes_service(account_store) -> NotesService:
    account_store.insert("alice12", "hash")
    return NotesService(notes=InMemoryNoteStore(), accounts=account_store)


def test_note_lifecycle(notes_service: NotesService) -> None:
    note = notes_service.create_note(1, "Groceries", "milk")

    notes_service.update_note(note.id, "Groceries", "milk, eggs")
    assert notes_service.read_note(note.id).content == "milk, eggs"

    notes_service.delete_note(note.id)
    notes_service.delete_note(note.id)
    with pytest.raises(NoteNotFoundError):
        notes_service.read_note(note.id)


def test_note_requires_active_owner(notes_service: NotesService, account_store) -> None:
    account_store.deactivate("alice12")

    with pytest.raises(AccountNotFoundError):
        notes_service.create_note(1, "Groceries", "milk")
    with pytest.raises(AccountNotFoundError):
        notes_service.create_note(99, "Groceries", "milk")


def test_notes_over_http(client: FlaskClient) -> None:
    client.post("/api/accounts", json={"username": "alice12", "password": "Secret123"})

    created = client.post(
        "/api/notes", json={"account_id": 1, "title": "Groceries", "content": "milk"}
    )
    assert created.status_code == 201
    note_id = created.get_json()["note"]["id"]

    updated = client.put(f"/api/notes/{note_id}", json={"title": "Shopping", "content": "eggs"})
    read = client.get(f"/api/notes/{note_id}")
    assert updated.status_code == 200
    assert read.get_json()["note"]["title"] == "Shopping"
    assert read.get_json()["note"]["content"] == "eggs"

    deleted = client.delete(f"/api/notes/{note_id}")
    gone = client.get(f"/api/notes/{note_id}")
    assert deleted.status_code == 200
    assert gone.status_code == 404
    assert gone.get_json()["error"] == "note_not_found"


def test_note_validation_and_unknown_owner(client: FlaskClient) -> None:
    empty_title = client.post("/api/notes", json={"account_id": 1, "title": "   "})
    no_owner = client.post("/api/notes", json={"account_id": 42, "title": "Orphan"})

    assert empty_title.status_code == 422
    assert empty_title.get_json()["context"]["fields"] == ["title"]
    assert no_owner.status_code == 404
    assert no_owner.get_json()["error"] == "account_not_found"


class UnreachableNoteStore(InMemoryNoteStore):
    def find_by_id(self, note_id: int) -> Note | None:
        raise AssertionError("store reached")

    def update(self, note_id: int, title: str, content: str) -> None:
        raise AssertionError("store reached")

    def deactivate(self, note_id: int) -> None:
        raise AssertionError("store reached")


def test_ids_beyond_column_range_never_reach_the_store(account_store) -> None:
    service = NotesService(notes=UnreachableNoteStore(), accounts=account_store)
    huge = 2**63

    with pytest.raises(NoteNotFoundError):
        service.read_note(huge)
    service.update_note(huge, "Groceries", "milk")
    service.delete_note(huge)
    with pytest.raises(AccountNotFoundError):
        service.create_note(huge, "Groceries", "milk")
    assert "find_by_id" not in account_store.calls


def test_oversized_ids_over_http(client: FlaskClient) -> None:
    huge = 99999999999999999999

    read = client.get(f"/api/notes/{huge}")
    updated = client.put(f"/api/notes/{huge}", json={"title": "Shopping"})
    deleted = client.delete(f"/api/notes/{huge}")
    created = client.post("/api/notes", json={"account_id": huge, "title": "t"})

    assert read.status_code == 404
    assert read.get_json()["error"] == "note_not_found"
    assert updated.status_code == 200
    assert deleted.status_code == 200
    assert created.status_code == 422
    assert created.get_json()["context"]["fields"] == ["account_id"]
