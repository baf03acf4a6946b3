# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Syntactic credential policy, checked before any storage access."""

from __future__ import annotations

import re

USERNAME_MIN_LENGTH = 5
USERNAME_MAX_LENGTH = 20
PASSWORD_MIN_LENGTH = 8

_USERNAME_RE = re.compile(r"[A-Za-z0-9_]+", re.ASCII)
_PASSWORD_RE = re.compile(r"[A-Za-z0-9!@#$%^&*()_]+", re.ASCII)


def is_valid_username(username: object) -> bool:
    if not isinstance(username, str) or not username:
        return False
    if not USERNAME_MIN_LENGTH <= len(username) <= USERNAME_MAX_LENGTH:
        return False
    return _USERNAME_RE.fullmatch(username) is not None


def is_valid_password(password: object) -> bool:
    if not isinstance(password, str) or not password:
        return False
    if len(password) < PASSWORD_MIN_LENGTH:
        return False
    return _PASSWORD_RE.fullmatch(password) is not None


def validate_credentials(username: object, password: object) -> bool:
    return is_valid_username(username) and is_valid_password(password)


__all__ = [
    "PASSWORD_MIN_LENGTH",
    "USERNAME_MAX_LENGTH",
    "USERNAME_MIN_LENGTH",
    "is_valid_password",
    "is_valid_username",
    "validate_credentials",
]
