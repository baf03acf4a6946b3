# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import Account, SessionToken, StoredCredentials
from .exceptions import (
    AccountNotFoundError,
    AuthenticationFailedError,
    DuplicateUsernameError,
    HashingFailureError,
    InvalidCredentialFormatError,
    StoreUnavailableError,
)
from .repositories import AccountStore, PasswordHasher, TokenIssuer
from .validation import validate_credentials

__all__ = [
    "Account",
    "AccountNotFoundError",
    "AccountStore",
    "AuthenticationFailedError",
    "DuplicateUsernameError",
    "HashingFailureError",
    "InvalidCredentialFormatError",
    "PasswordHasher",
    "SessionToken",
    "StoreUnavailableError",
    "StoredCredentials",
    "TokenIssuer",
    "validate_credentials",
]
