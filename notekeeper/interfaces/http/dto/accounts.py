# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

# Shape only. The credential policy lives in domain.accounts.validation so that
# malformed values map onto invalid_credential_format, not validation_error.


class RegisterRequestDTO(BaseModel):
    model_config = ConfigDict(strict=True, hide_input_in_errors=True)

    username: str
    password: str


class LoginRequestDTO(BaseModel):
    model_config = ConfigDict(strict=True, hide_input_in_errors=True)

    username: str
    password: str


class ChangePasswordRequestDTO(BaseModel):
    model_config = ConfigDict(strict=True, hide_input_in_errors=True)

    new_password: str


class AccountDTO(BaseModel):
    id: int
    username: str


class LoginResponseDTO(BaseModel):
    status: str = "success"
    token: str
    expires_at: str
