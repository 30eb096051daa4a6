"""Database schema for ledgerstats."""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.types import TypeDecorator


class DecimalText(TypeDecorator):
    """Decimal stored as its exact text form.

    SQLite has no decimal type; a NUMERIC column would round-trip
    through float.
    """

    impl = String(64)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return str(Decimal(value))

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return Decimal(value)


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class TransactionRow(Base):
    """Stored financial transaction.

    The ``type`` column holds the Credit/Debit tag under the name used by
    the seed file; it maps to ``Transaction.kind`` in the domain.
    """

    __tablename__ = "transactions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    type: Mapped[str | None] = mapped_column(String(16), nullable=True)
    amount: Mapped[Decimal] = mapped_column(DecimalText, nullable=False)
