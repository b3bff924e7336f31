# This project was developed with assistance from AI tools.
"""Rate lookup routes: latest applicable rate, history, and per-type trends."""

from fastapi import APIRouter, Depends, HTTPException, Query, status
from lendscope_db import get_db
from lendscope_db.enums import LoanType
from sqlalchemy.ext.asyncio import AsyncSession

from ..schemas.products import RateObservation
from ..schemas.rates import RateTrendPoint
from ..services.catalog import LoanCatalog
from ..services.rate_tracker import get_historical_rates, get_rate_trends_by_type
from ._deps import get_loan_catalog

router = APIRouter()


@router.get("/products/{product_id}/latest", response_model=RateObservation)
async def latest_rate(
    product_id: int,
    credit_score: int = Query(default=720, ge=300, le=850),
    catalog: LoanCatalog = Depends(get_loan_catalog),
) -> RateObservation:
    """Most recent rate whose credit band contains ``credit_score``."""
    rate = await catalog.latest_rate(product_id, credit_score)
    if rate is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No rate for product {product_id} at credit score {credit_score}",
        )
    return rate


@router.get("/products/{product_id}/history", response_model=list[RateObservation])
async def rate_history(
    product_id: int,
    days: int = Query(default=30, ge=1, le=3650),
    session: AsyncSession = Depends(get_db),
) -> list[RateObservation]:
    return await get_historical_rates(session, product_id, days)


@router.get("/trends/{loan_type}", response_model=list[RateTrendPoint])
async def rate_trends(
    loan_type: LoanType,
    days: int = Query(default=90, ge=1, le=3650),
    session: AsyncSession = Depends(get_db),
) -> list[RateTrendPoint]:
    """Daily average, min, and max rate across every product of the type."""
    return await get_rate_trends_by_type(session, loan_type, days)
