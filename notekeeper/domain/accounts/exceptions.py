# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from notekeeper.shared.errors.base import DomainError, InfrastructureError


class InvalidCredentialFormatError(DomainError):
    code = "invalid_credential_format"
    status = HTTPStatus.UNPROCESSABLE_ENTITY
    message = "Invalid user data."


class DuplicateUsernameError(DomainError):
    code = "duplicate_username"
    status = HTTPStatus.CONFLICT
    message = "Username is already taken."


class AuthenticationFailedError(DomainError):
    code = "authentication_failed"
    status = HTTPStatus.UNAUTHORIZED
    message = "Incorrect username or password."


class AccountNotFoundError(DomainError):
    code = "account_not_found"
    status = HTTPStatus.NOT_FOUND
    message = "User not found."


class HashingFailureError(InfrastructureError):
    def __init__(self) -> None:
        super().__init__(
            "hashing_failure",
            message="Unable to process credentials.",
        )


class StoreUnavailableError(InfrastructureError):
    def __init__(self) -> None:
        super().__init__(
            "store_unavailable",
            status=HTTPStatus.SERVICE_UNAVAILABLE,
            message="Storage is temporarily unavailable.",
        )
