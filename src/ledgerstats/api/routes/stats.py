"""Statistics API endpoints.

GET /api/stats/total-credit         - Sum of Credit amounts
GET /api/stats/total-debit          - Sum of Debit amounts
GET /api/stats/highest-amount-date  - Timestamp of the largest transaction
GET /api/stats/average-per-day      - Average of per-day averages
GET /api/stats/top-dates            - Dates ranked by summed amount
GET /api/stats/summary              - All of the above from one fetch
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from ledgerstats.aggregation.stats import TOP_DATES_LIMIT
from ledgerstats.api.deps import get_db_session
from ledgerstats.db.repo import DbSession
from ledgerstats.models.types import (
    AverageResponse,
    HighestAmountDateResponse,
    StatsSummary,
    TopDatesResponse,
    TotalResponse,
)
from ledgerstats.service import RepositorySource, TransactionStatsService

router = APIRouter(prefix="/stats")


def get_stats_service(
    session: DbSession = Depends(get_db_session),
) -> TransactionStatsService:
    """Dependency building the facade over the request's session."""
    return TransactionStatsService(RepositorySource(session))


@router.get("/total-credit", response_model=TotalResponse)
def get_total_credit(
    service: TransactionStatsService = Depends(get_stats_service),
) -> TotalResponse:
    return TotalResponse(total=service.get_total_credit())


@router.get("/total-debit", response_model=TotalResponse)
def get_total_debit(
    service: TransactionStatsService = Depends(get_stats_service),
) -> TotalResponse:
    return TotalResponse(total=service.get_total_debit())


@router.get("/highest-amount-date", response_model=HighestAmountDateResponse)
def get_highest_amount_date(
    service: TransactionStatsService = Depends(get_stats_service),
) -> HighestAmountDateResponse:
    """Timestamp of the largest transaction; null when there are none."""
    return HighestAmountDateResponse(date=service.get_highest_amount_date())


@router.get("/average-per-day", response_model=AverageResponse)
def get_average_per_day(
    service: TransactionStatsService = Depends(get_stats_service),
) -> AverageResponse:
    return AverageResponse(average=service.get_average_amount_per_day())


@router.get("/top-dates", response_model=TopDatesResponse)
def get_top_dates(
    limit: int = Query(TOP_DATES_LIMIT, ge=1, le=50),
    service: TransactionStatsService = Depends(get_stats_service),
) -> TopDatesResponse:
    """Dates with the highest summed amount, highest first.

    Args:
        limit: Maximum number of dates (1-50).
        service: Statistics facade (injected).
    """
    return TopDatesResponse(dates=service.get_top_dates(limit))


@router.get("/summary", response_model=StatsSummary)
def get_summary(
    service: TransactionStatsService = Depends(get_stats_service),
) -> StatsSummary:
    return service.get_summary()
