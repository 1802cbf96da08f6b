"""
Data access for the signatures collection backed by SQLAlchemy.

Lookups never raise for a missing record: they return ``NotFound`` and leave
the HTTP translation to the router. Every mutation that reports a record
re-reads it from storage after the write, so callers always see what is
durably stored rather than a locally patched copy.
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Callable, ContextManager, Iterator, Mapping, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from guestbook.db.models import SignatureRecord
from guestbook.db.session import get_session
from guestbook.domain.signatures import (
    Found,
    LookupResult,
    NotFound,
    Signature,
    is_valid_signature_id,
    new_signature_id,
    normalize_signature_id,
)

logger = logging.getLogger(__name__)

WRITABLE_FIELDS = ("name", "message")


class StorageError(Exception):
    """Raised when the underlying persistence operation fails."""


def _entity_to_signature(entity: SignatureRecord) -> Signature:
    return Signature(id=entity.id, name=entity.name, message=entity.message)


def _writable_fields(data: Any) -> dict:
    if not isinstance(data, Mapping):
        raise StorageError(f"Cannot store signature data of type {type(data).__name__}")
    return {key: data[key] for key in WRITABLE_FIELDS if key in data}


class SignatureStore:
    """CRUD operations over the signatures collection."""

    def __init__(self, session_factory: Callable[[], ContextManager[Session]] = get_session) -> None:
        self._session_factory = session_factory

    @contextmanager
    def _session(self, action: str) -> Iterator[Session]:
        try:
            with self._session_factory() as session:
                yield session
        except SQLAlchemyError as exc:
            raise StorageError(f"Failed while {action}") from exc

    def _find(self, signature_id: str) -> Optional[Signature]:
        with self._session("reading a signature") as session:
            entity = session.get(SignatureRecord, signature_id)
            return _entity_to_signature(entity) if entity else None

    def create(self, data: Mapping[str, Any]) -> Signature:
        """Insert a new signature and return it as re-read from storage."""
        fields = _writable_fields(data)
        signature_id = new_signature_id()
        with self._session("creating a signature") as session:
            session.add(SignatureRecord(id=signature_id, **fields))
            session.commit()
        created = self._find(signature_id)
        if created is None:
            raise StorageError("Failed to create a signature")
        logger.info("Created signature %s", signature_id)
        return created

    def get_by_id(self, signature_id: str) -> LookupResult:
        if not is_valid_signature_id(signature_id):
            logger.debug("Rejected malformed signature id %r", signature_id)
            return NotFound(signature_id)
        signature = self._find(normalize_signature_id(signature_id))
        if signature is None:
            return NotFound(signature_id)
        return Found(signature)

    def get_all(self) -> list[Signature]:
        with self._session("listing signatures") as session:
            entities = session.execute(select(SignatureRecord)).scalars().all()
            return [_entity_to_signature(entity) for entity in entities]

    def update_by_id(self, signature_id: str, partial: Mapping[str, Any]) -> LookupResult:
        """Apply the given name/message to a signature; omitted fields stay unchanged."""
        existing = self.get_by_id(signature_id)
        if isinstance(existing, NotFound):
            return existing
        fields = _writable_fields(partial)
        if not fields:
            return existing
        stored_id = existing.signature.id
        with self._session("updating a signature") as session:
            result = session.execute(
                update(SignatureRecord).where(SignatureRecord.id == stored_id).values(**fields)
            )
            matched = result.rowcount
            session.commit()
        if matched == 0:
            # deleted between the lookup and the write
            return NotFound(signature_id)
        logger.info("Updated signature %s (%s)", stored_id, ", ".join(sorted(fields)))
        return self.get_by_id(stored_id)

    def delete_by_id(self, signature_id: str) -> LookupResult:
        """Remove a signature, returning it as it was just before deletion."""
        existing = self.get_by_id(signature_id)
        if isinstance(existing, NotFound):
            return existing
        stored_id = existing.signature.id
        with self._session("deleting a signature") as session:
            session.execute(delete(SignatureRecord).where(SignatureRecord.id == stored_id))
            session.commit()
        logger.info("Deleted signature %s", stored_id)
        return existing
