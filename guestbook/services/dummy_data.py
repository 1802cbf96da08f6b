"""Random guestbook signatures for demos and manual testing."""
from __future__ import annotations

from typing import Optional

from faker import Faker

from guestbook.domain.signatures import Signature
from guestbook.repositories.signature_store import SignatureStore


def add_dummy_signatures(store: SignatureStore, n: int, fake: Optional[Faker] = None) -> list[Signature]:
    """Create ``n`` signatures with a fake name and a three-sentence message."""
    fake = fake or Faker()
    created: list[Signature] = []
    for _ in range(n):
        created.append(
            store.create(
                {
                    "name": fake.name(),
                    "message": " ".join(fake.sentences(nb=3)),
                }
            )
        )
    return created
