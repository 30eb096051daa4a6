"""Transaction statistics.

Computes totals, the largest transaction's timestamp, the average of
per-day averages, and the days with the highest summed amount.
Every function is pure: the transactions are passed in on each call.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import date, datetime
from decimal import ROUND_HALF_EVEN, Decimal

from ledgerstats.models.domain import CREDIT, DEBIT, Transaction
from ledgerstats.models.types import StatsSummary

TOP_DATES_LIMIT = 5

_ZERO = Decimal("0")
_CENTS = Decimal("0.01")


def _sum_kind(transactions: Iterable[Transaction], kind: str) -> Decimal:
    return sum((t.amount for t in transactions if t.kind == kind), _ZERO)


def _group_by_day(transactions: Iterable[Transaction]) -> dict[date, list[Decimal]]:
    """Group amounts by calendar date.

    Groups keep the order in which each date is first seen.
    """
    groups: dict[date, list[Decimal]] = {}
    for t in transactions:
        groups.setdefault(t.date.date(), []).append(t.amount)
    return groups


def total_credit(transactions: Iterable[Transaction]) -> Decimal:
    """Sum of amounts tagged exactly "Credit". Zero when none match."""
    return _sum_kind(transactions, CREDIT)


def total_debit(transactions: Iterable[Transaction]) -> Decimal:
    """Sum of amounts tagged exactly "Debit". Zero when none match."""
    return _sum_kind(transactions, DEBIT)


def highest_amount_date(transactions: Sequence[Transaction]) -> datetime | None:
    """Timestamp of the transaction with the largest amount.

    When several transactions share the maximum amount, the first one
    in input order wins.

    Args:
        transactions: Transactions in their original order.

    Returns:
        The winning transaction's ``date``, or None for empty input.
    """
    if not transactions:
        return None
    # max() keeps the first maximal element
    return max(transactions, key=lambda t: t.amount).date


def average_amount_per_day(transactions: Iterable[Transaction]) -> Decimal:
    """Mean of the per-day average amounts, rounded to cents.

    This is a two-level average: each calendar day is averaged first,
    then the day averages are averaged. It differs from total / count
    whenever days hold different numbers of transactions.

    Args:
        transactions: Transactions to aggregate.

    Returns:
        Average rounded half-to-even to two places; 0.00 for empty input.
    """
    groups = _group_by_day(transactions)
    if not groups:
        return _ZERO.quantize(_CENTS)

    daily_averages = [sum(amounts, _ZERO) / len(amounts) for amounts in groups.values()]
    mean = sum(daily_averages, _ZERO) / len(daily_averages)
    return mean.quantize(_CENTS, rounding=ROUND_HALF_EVEN)


def top_dates_by_total(
    transactions: Iterable[Transaction],
    limit: int = TOP_DATES_LIMIT,
) -> list[date]:
    """Calendar dates ranked by summed amount, highest first.

    Days with equal sums keep the order in which they were first seen.

    Args:
        transactions: Transactions to aggregate.
        limit: Maximum number of dates to return.

    Returns:
        Up to ``limit`` dates; fewer if fewer distinct days exist.
    """
    totals = [(day, sum(amounts, _ZERO)) for day, amounts in _group_by_day(transactions).items()]
    # sorted() is stable with reverse=True as well
    ranked = sorted(totals, key=lambda pair: pair[1], reverse=True)
    return [day for day, _ in ranked[:limit]]


def summarize(transactions: Sequence[Transaction]) -> StatsSummary:
    """Compute all statistics over one snapshot of transactions."""
    return StatsSummary(
        total_credit=total_credit(transactions),
        total_debit=total_debit(transactions),
        highest_amount_date=highest_amount_date(transactions),
        average_amount_per_day=average_amount_per_day(transactions),
        top_dates=top_dates_by_total(transactions),
    )
