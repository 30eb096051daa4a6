"""Repository pattern for database operations.

Encapsulates all SQLAlchemy queries, keeping aggregation pure.
Returns domain models (not SQLAlchemy entities) to external callers.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from ledgerstats.db.schema import TransactionRow
from ledgerstats.models.domain import Transaction

if TYPE_CHECKING:
    from sqlalchemy.orm import Session as DbSession
else:
    DbSession = Session

__all__ = ["DbSession"]


def _row_to_entity(row: TransactionRow) -> Transaction:
    """Convert SQLAlchemy TransactionRow to domain entity."""
    return Transaction(id=row.id, date=row.date, kind=row.type, amount=row.amount)


def _entity_to_row(transaction: Transaction) -> TransactionRow:
    return TransactionRow(
        id=transaction.id,
        date=transaction.date,
        type=transaction.kind,
        amount=transaction.amount,
    )


def get_all_transactions(session: DbSession) -> list[Transaction]:
    """Get every transaction, ordered by id.

    The id order is the input order aggregation tie-breaks depend on.
    """
    rows = session.scalars(select(TransactionRow).order_by(TransactionRow.id)).all()
    return [_row_to_entity(r) for r in rows]


def count_transactions(session: DbSession) -> int:
    """Number of stored transactions."""
    return session.scalar(select(func.count()).select_from(TransactionRow)) or 0


def add_transactions(session: DbSession, transactions: Iterable[Transaction]) -> int:
    """Insert transactions and commit. Returns the number inserted."""
    rows = [_entity_to_row(t) for t in transactions]
    session.add_all(rows)
    session.commit()
    return len(rows)
