"""Bootstrap seeding of an empty transaction store from a JSON file."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import TypeAdapter

from ledgerstats.db import repo
from ledgerstats.db.repo import DbSession
from ledgerstats.models.domain import Transaction
from ledgerstats.models.types import TransactionRecord

logger = logging.getLogger(__name__)

_records_adapter = TypeAdapter(list[TransactionRecord] | None)


def load_seed_records(path: Path) -> list[Transaction]:
    """Read and validate a JSON seed file.

    Args:
        path: File holding a JSON list of transaction objects.

    Returns:
        Domain transactions in file order. Empty if the file holds null or [].

    Raises:
        FileNotFoundError: If the file does not exist.
        pydantic.ValidationError: If a record is malformed.
    """
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    records = _records_adapter.validate_python(data) or []
    return [r.to_entity() for r in records]


def seed_if_empty(session: DbSession, path: Path) -> int:
    """Load the seed file into the store when it holds no transactions.

    Returns:
        Number of transactions inserted (0 when the store was not empty).
    """
    existing = repo.count_transactions(session)
    if existing:
        logger.info(f"Store already holds {existing} transactions, skipping seed")
        return 0

    transactions = load_seed_records(path)
    if not transactions:
        logger.warning("No data was found in the JSON file.")
        return 0

    inserted = repo.add_transactions(session, transactions)
    logger.info(f"Seeded {inserted} transactions from {path}")
    return inserted
