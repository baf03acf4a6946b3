# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import Note


class NoteStore(Protocol):
    def insert(self, account_id: int, title: str, content: str) -> Note: ...
    def find_by_id(self, note_id: int) -> Note | None: ...
    def update(self, note_id: int, title: str, content: str) -> None: ...
    def deactivate(self, note_id: int) -> None: ...
