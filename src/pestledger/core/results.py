from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Generic, TypeVar, Union


T = TypeVar("T")


class ErrorCode(IntEnum):
    """Failure codes returned by registry operations.

    Values double as HTTP status codes at the API boundary.
    """

    FORBIDDEN = 403
    NOT_FOUND = 404
    CONFLICT = 409


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True

    def to_dict(self) -> dict[str, Any]:
        return {"ok": True, "value": self.value}


@dataclass(frozen=True)
class Err:
    error: ErrorCode

    @property
    def ok(self) -> bool:
        return False

    def to_dict(self) -> dict[str, Any]:
        return {"ok": False, "error": int(self.error)}


Result = Union[Ok[T], Err]
