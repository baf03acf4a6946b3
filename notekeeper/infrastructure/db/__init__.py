# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .session import Base, Database
from .models import AccountRow, NoteRow

__all__ = ["AccountRow", "Base", "Database", "NoteRow"]
