"""Domain types for guestbook signatures and lookup results."""
from __future__ import annotations

import re
import secrets
from dataclasses import dataclass
from typing import Optional, Union

SIGNATURE_ID_PATTERN = re.compile(r"[0-9a-f]{24}", re.IGNORECASE)


def new_signature_id() -> str:
    """Return a fresh 24-character lowercase hex identifier."""
    return secrets.token_hex(12)


def is_valid_signature_id(value: object) -> bool:
    """Return True when value has the shape of a signature identifier (hex, any case)."""
    if not isinstance(value, str):
        return False
    return bool(SIGNATURE_ID_PATTERN.fullmatch(value))


def normalize_signature_id(value: str) -> str:
    """Stored identifiers are lowercase; lookups accept either case."""
    return value.lower()


@dataclass(frozen=True)
class Signature:
    """A single guestbook entry as stored."""

    id: str
    name: str
    message: Optional[str] = None

    def to_dict(self) -> dict:
        data = {"id": self.id, "name": self.name}
        # a signature stored without a message has no message key at all
        if self.message is not None:
            data["message"] = self.message
        return data


@dataclass(frozen=True)
class Found:
    signature: Signature


@dataclass(frozen=True)
class NotFound:
    signature_id: str


LookupResult = Union[Found, NotFound]
