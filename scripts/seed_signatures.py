#!/usr/bin/env python3
"""
Fill the guestbook with random signatures.

Usage:
  python scripts/seed_signatures.py [--count 10] [--seed 42]
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

# make the guestbook package importable when run from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from faker import Faker  # noqa: E402

from guestbook.db.create_tables import create_all  # noqa: E402
from guestbook.repositories.signature_store import SignatureStore  # noqa: E402
from guestbook.services.dummy_data import add_dummy_signatures  # noqa: E402


def main() -> None:
    ap = argparse.ArgumentParser(description="Insert random guestbook signatures")
    ap.add_argument("--count", type=int, default=10, help="How many signatures to create (default: 10)")
    ap.add_argument("--seed", type=int, help="Seed for reproducible fake data")
    args = ap.parse_args()
    if args.count < 1:
        raise SystemExit("--count must be at least 1")

    fake = Faker()
    if args.seed is not None:
        fake.seed_instance(args.seed)

    create_all()
    created = add_dummy_signatures(SignatureStore(), args.count, fake)
    print(f"OK: {len(created)} signature(s) created")
    for signature in created:
        print(f"  {signature.id}  {signature.name}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
