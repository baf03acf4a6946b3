# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from notekeeper.shared.errors.base import DomainError


class NoteNotFoundError(DomainError):
    code = "note_not_found"
    status = HTTPStatus.NOT_FOUND
    message = "Note not found."

    def __init__(self, note_id: int) -> None:
        super().__init__(context={"note_id": note_id})
