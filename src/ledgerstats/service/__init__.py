"""Query facade over the transaction store.

- Fetches transactions from a source and applies the aggregation functions
- Logs each operation; errors are logged and re-raised unchanged
"""

from ledgerstats.service.sources import RepositorySource, StaticSource, TransactionSource
from ledgerstats.service.stats_service import TransactionStatsService

__all__ = ["RepositorySource", "StaticSource", "TransactionSource", "TransactionStatsService"]
