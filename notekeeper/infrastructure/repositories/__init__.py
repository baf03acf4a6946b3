# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .accounts import SqlAlchemyAccountStore
from .notes import SqlAlchemyNoteStore

__all__ = ["SqlAlchemyAccountStore", "SqlAlchemyNoteStore"]
