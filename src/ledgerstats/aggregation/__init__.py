"""Aggregation module for transaction statistics.

- Pure functions over an in-memory sequence of transactions
- Forbidden: database access, logging, mutation of inputs
"""

from ledgerstats.aggregation.stats import (
    average_amount_per_day,
    highest_amount_date,
    summarize,
    top_dates_by_total,
    total_credit,
    total_debit,
)

__all__ = [
    "average_amount_per_day",
    "highest_amount_date",
    "summarize",
    "top_dates_by_total",
    "total_credit",
    "total_debit",
]
