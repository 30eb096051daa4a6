"""Transaction sources.

A source has one job: hand back the full transaction sequence.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from ledgerstats.db import repo
from ledgerstats.db.repo import DbSession
from ledgerstats.models.domain import Transaction


class TransactionSource(ABC):
    """Abstract base class for transaction sources.

    Sources must NOT filter, sort by amount or otherwise aggregate.
    The order they return is the order tie-breaks are resolved in.
    """

    @abstractmethod
    def fetch_all(self) -> list[Transaction]:
        """Return every transaction."""
        pass


class RepositorySource(TransactionSource):
    """Reads transactions from the database through the repository.

    The session is owned by the caller.
    """

    def __init__(self, session: DbSession):
        self.session = session

    def fetch_all(self) -> list[Transaction]:
        return repo.get_all_transactions(self.session)


class StaticSource(TransactionSource):
    """Serves an already-loaded sequence of transactions."""

    def __init__(self, transactions: Iterable[Transaction]):
        self._transactions = list(transactions)

    def fetch_all(self) -> list[Transaction]:
        return list(self._transactions)
