"""Identifiers — format check and generation of record keys.

Invariants:
    - A record key is exactly 32 hexadecimal characters (UUID4 hex)
    - is_valid_id never touches storage

Design Decisions:
    - Checked before any storage access so a malformed key (400) is distinguishable
      from a well-formed key that matches nothing (404)
"""

import re
import uuid

ID_LENGTH: int = 32
_ID_PATTERN = re.compile(r"[0-9a-fA-F]{32}")


def is_valid_id(raw: object) -> bool:
    return isinstance(raw, str) and _ID_PATTERN.fullmatch(raw) is not None


def normalize_id(raw: str) -> str:
    """Stored keys are lowercase; lookups accept either case."""
    return raw.lower()


def new_id() -> str:
    return uuid.uuid4().hex
