"""Shared pytest fixtures for ledgerstats tests."""

from datetime import datetime
from decimal import Decimal

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from ledgerstats.db.schema import Base
from ledgerstats.models.domain import Transaction


@pytest.fixture
def engine():
    """Create an in-memory SQLite engine for testing."""
    engine = create_engine("sqlite:///:memory:", echo=False)
    Base.metadata.create_all(engine)
    return engine


@pytest.fixture
def session(engine):
    """Create a database session for testing."""
    Session = sessionmaker(bind=engine)
    session = Session()
    yield session
    session.close()


@pytest.fixture
def sample_transactions() -> list[Transaction]:
    """Five transactions over four days."""
    return [
        Transaction(1, datetime(2024, 8, 12, 9, 30), "Credit", Decimal("1000")),
        Transaction(2, datetime(2024, 8, 11, 14, 0), "Debit", Decimal("500")),
        Transaction(3, datetime(2024, 8, 10, 8, 15), "Credit", Decimal("300")),
        Transaction(4, datetime(2024, 8, 10, 17, 45), "Credit", Decimal("200")),
        Transaction(5, datetime(2024, 8, 9, 12, 0), "Debit", Decimal("150")),
    ]
