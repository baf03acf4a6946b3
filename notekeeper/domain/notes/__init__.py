# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import MAX_ROW_ID, Note
from .exceptions import NoteNotFoundError
from .repositories import NoteStore

__all__ = ["MAX_ROW_ID", "Note", "NoteNotFoundError", "NoteStore"]
