"""Tests for schema, repository and session helpers."""

from datetime import datetime
from decimal import Decimal

from ledgerstats.db import repo
from ledgerstats.db.schema import Base, TransactionRow
from ledgerstats.db.session import get_engine, init_db, session_scope
from ledgerstats.models.domain import Transaction
from ledgerstats.service import RepositorySource, StaticSource, TransactionStatsService


class TestSchemaCreation:
    """Schema can be created without errors."""

    def test_transactions_table_created(self, engine):
        assert "transactions" in Base.metadata.tables
        columns = set(Base.metadata.tables["transactions"].columns.keys())
        assert columns == {"id", "date", "type", "amount"}


class TestRepository:
    """Repository returns domain entities."""

    def test_empty_store(self, session):
        assert repo.count_transactions(session) == 0
        assert repo.get_all_transactions(session) == []

    def test_add_and_read_back(self, session):
        added = repo.add_transactions(
            session,
            [
                Transaction(7, datetime(2024, 8, 10, 8, 15), "Credit", Decimal("300.50")),
                Transaction(3, datetime(2024, 8, 9, 12, 0), None, Decimal("-20")),
            ],
        )

        assert added == 2
        assert repo.count_transactions(session) == 2

        fetched = repo.get_all_transactions(session)
        assert [t.id for t in fetched] == [3, 7]
        assert isinstance(fetched[0], Transaction)
        assert fetched[0].kind is None
        assert fetched[1].date == datetime(2024, 8, 10, 8, 15)
        assert fetched[1].amount == Decimal("300.50")

    def test_kind_stored_in_type_column(self, session, sample_transactions):
        repo.add_transactions(session, sample_transactions[:1])

        row = session.query(TransactionRow).one()
        assert row.type == "Credit"


class TestSession:
    """File-backed engine and session helpers."""

    def test_engine_cached_per_path(self, tmp_path):
        db_path = tmp_path / "nested" / "stats.db"
        assert get_engine(db_path) is get_engine(db_path)
        assert db_path.parent.exists()

    def test_session_context_commits(self, tmp_path, sample_transactions):
        db_path = tmp_path / "stats.db"
        init_db(db_path)

        with session_scope(db_path) as session:
            session.add(
                TransactionRow(id=1, date=datetime(2024, 1, 1), type="Debit", amount=Decimal("5"))
            )

        with session_scope(db_path) as session:
            assert repo.count_transactions(session) == 1


class TestExactAmounts:
    """Amounts come back from the store exactly as written."""

    AMOUNTS = [Decimal("1234567890123456.78"), Decimal("0.005"), Decimal("-42.10")]

    def _store(self, session) -> list[Transaction]:
        transactions = [
            Transaction(i, datetime(2024, 8, 12, i), "Credit", amount)
            for i, amount in enumerate(self.AMOUNTS, start=1)
        ]
        repo.add_transactions(session, transactions)
        return transactions

    def test_round_trip(self, session):
        self._store(session)
        session.expire_all()

        fetched = repo.get_all_transactions(session)

        assert [t.amount for t in fetched] == self.AMOUNTS
        assert str(fetched[1].amount) == "0.005"

    def test_stored_and_in_memory_statistics_agree(self, session):
        transactions = self._store(session)
        session.expire_all()

        stored = TransactionStatsService(RepositorySource(session)).get_summary()
        in_memory = TransactionStatsService(StaticSource(transactions)).get_summary()

        assert stored == in_memory
        assert stored.total_credit == Decimal("1234567890123414.685")
