"""Pydantic models for ledgerstats.

Seed file records and API payloads.
"""

from datetime import date, datetime
from decimal import Decimal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from ledgerstats.models.domain import Transaction


class TransactionRecord(BaseModel):
    """One entry of the JSON seed file.

    The seed file uses PascalCase keys (``Id``, ``Date``, ``Type``,
    ``Amount``); lowercase variants are accepted too. Amounts carry at
    most two decimal places.
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(validation_alias=AliasChoices("Id", "id"))
    date: datetime = Field(validation_alias=AliasChoices("Date", "date"))
    kind: str | None = Field(
        default=None, validation_alias=AliasChoices("Type", "type", "kind")
    )
    amount: Decimal = Field(
        decimal_places=2, validation_alias=AliasChoices("Amount", "amount")
    )

    def to_entity(self) -> Transaction:
        """Convert to the domain dataclass."""
        return Transaction(id=self.id, date=self.date, kind=self.kind, amount=self.amount)


class StatsSummary(BaseModel):
    """All five statistics computed over one snapshot of transactions."""

    total_credit: Decimal
    total_debit: Decimal
    highest_amount_date: datetime | None
    average_amount_per_day: Decimal
    top_dates: list[date]


class TotalResponse(BaseModel):
    """Credit or debit total."""

    total: Decimal


class HighestAmountDateResponse(BaseModel):
    """Timestamp of the largest transaction, if any."""

    date: datetime | None


class AverageResponse(BaseModel):
    """Average of per-day average amounts."""

    average: Decimal


class TopDatesResponse(BaseModel):
    """Calendar dates ranked by summed amount."""

    dates: list[date]
