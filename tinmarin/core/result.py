"""Result Envelope — uniform {success, content} outcome of persistence operations.

Invariants:
    - success=True never carries a failure tag
    - success=False always carries exactly one Failure tag
    - content is an entity, a list of entities, or an {"error": message} body

Design Decisions:
    - Tagged result over exceptions for expected outcomes: "not found", "duplicate"
      and "storage fault" stay distinguishable without matching exception types
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Failure(str, Enum):
    """Why an operation did not succeed."""
    INVALID = "invalid"
    NOT_FOUND = "not_found"
    DUPLICATE = "duplicate"
    STORAGE = "storage"


@dataclass(frozen=True)
class Result:
    success: bool
    content: Any = None
    failure: Failure | None = None

    @classmethod
    def ok(cls, content: Any = None) -> "Result":
        return cls(True, content)

    @classmethod
    def fail(cls, failure: Failure, message: str, **extra: Any) -> "Result":
        return cls(False, {"error": message, **extra}, failure)
