"""Domain models for ledgerstats.

Pure Python dataclasses representing domain entities.
These models are independent of SQLAlchemy and are what the
aggregation layer operates on.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

# Only these two tags are counted by the credit/debit totals.
# Matching is exact and case-sensitive.
CREDIT = "Credit"
DEBIT = "Debit"


@dataclass(frozen=True)
class Transaction:
    """A single financial movement.

    Only the calendar part of ``date`` matters for per-day grouping.
    ``kind`` is free text; anything other than ``CREDIT`` or ``DEBIT``
    is excluded from both totals.
    """

    id: int
    date: datetime
    kind: str | None
    amount: Decimal
