# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from notekeeper.domain.notes.entities import MAX_ROW_ID


class CreateNoteRequestDTO(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    account_id: int = Field(ge=1, le=MAX_ROW_ID)
    title: str = Field(min_length=1, max_length=200)
    content: str = Field(default="", max_length=65535)


class UpdateNoteRequestDTO(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(min_length=1, max_length=200)
    content: str = Field(default="", max_length=65535)
