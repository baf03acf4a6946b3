# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Tagged outcome handed to the transport layer."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Literal

if TYPE_CHECKING:
    from notekeeper.shared.errors.base import AppError


@dataclass(slots=True, frozen=True)
class Result:
    status: Literal["success", "error"]
    message: str | None = None
    code: str | None = None
    data: Mapping[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status == "success"

    @classmethod
    def success(cls, message: str | None = None, **data: Any) -> Result:
        return cls(status="success", message=message, data=data)

    @classmethod
    def from_error(cls, error: AppError) -> Result:
        data = {"context": dict(error.context)} if error.context else {}
        return cls(status="error", message=error.message, code=error.code, data=data)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"status": self.status}
        if self.code is not None:
            payload["error"] = self.code
        if self.message is not None:
            payload["message"] = self.message
        payload.update(self.data)
        return payload
