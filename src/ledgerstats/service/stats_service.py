"""Transaction statistics facade.

Pairs a transaction source with the pure aggregation functions. Each
operation logs before and after, and any failure during fetch or
computation is logged and re-raised as-is.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from decimal import Decimal
from typing import Callable, TypeVar

from ledgerstats.aggregation import stats
from ledgerstats.models.domain import Transaction
from ledgerstats.models.types import StatsSummary
from ledgerstats.service.sources import TransactionSource

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TransactionStatsService:
    """Query operations over a transaction source.

    Stateless between calls: every operation fetches a fresh snapshot.
    """

    def __init__(self, source: TransactionSource, log: logging.Logger | None = None):
        """Initialize service.

        Args:
            source: Where transactions are fetched from.
            log: Logger receiving progress and error messages.
                Defaults to this module's logger.
        """
        self.source = source
        self.log = log or logger

    def _run(
        self,
        action: str,
        result_label: str,
        compute: Callable[[list[Transaction]], T],
        render: Callable[[T], str] = str,
    ) -> T:
        self.log.info(f"Getting {action}.")
        try:
            result = compute(self.source.fetch_all())
        except Exception as e:
            self.log.error(f"Error retrieving {action}: {e}", exc_info=e)
            raise
        self.log.info(f"{result_label}: {render(result)}")
        return result

    def get_total_credit(self) -> Decimal:
        """Total amount of all Credit transactions."""
        return self._run(
            "total credit amount", "Total credit amount retrieved", stats.total_credit
        )

    def get_total_debit(self) -> Decimal:
        """Total amount of all Debit transactions."""
        return self._run(
            "total debit amount", "Total debit amount retrieved", stats.total_debit
        )

    def get_highest_amount_date(self) -> datetime | None:
        """Timestamp of the transaction with the highest amount, or None."""
        return self._run(
            "transaction with the highest amount date/time",
            "Transaction with highest amount date/time retrieved",
            stats.highest_amount_date,
        )

    def get_average_amount_per_day(self) -> Decimal:
        """Average of per-day average amounts, rounded to cents."""
        return self._run(
            "average amount per day",
            "Average amount per day calculated",
            stats.average_amount_per_day,
        )

    def get_top_dates(self, limit: int = stats.TOP_DATES_LIMIT) -> list[date]:
        """Dates with the highest total transaction amounts."""
        return self._run(
            f"top {limit} dates with the highest total amount",
            f"Top {limit} dates with highest total amount retrieved",
            lambda transactions: stats.top_dates_by_total(transactions, limit),
            lambda dates: ", ".join(d.isoformat() for d in dates),
        )

    def get_summary(self) -> StatsSummary:
        """All statistics computed over a single fetch."""
        return self._run("statistics summary", "Statistics summary computed", stats.summarize)
