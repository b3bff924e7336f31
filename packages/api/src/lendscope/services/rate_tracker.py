# This project was developed with assistance from AI tools.
"""Rate tracking: history queries, trends, and batch ingestion of rate quotes.

Rate sources are supplied through an explicit ``RateTrackerConfig`` at
construction. Fetching polls each enabled source once; a failing source is
recorded in the summary and never aborts the others. Ingestion only appends
new ``InterestRate`` rows.
"""

import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

import httpx
from lendscope_db import InterestRate, LoanProduct
from lendscope_db.enums import LoanType
from pydantic import TypeAdapter, ValidationError
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.config import Settings
from ..schemas.products import RateObservation
from ..schemas.rates import (
    FetchSummary,
    RateQuote,
    RateTrendPoint,
    SourceError,
    SourceResult,
)

logger = logging.getLogger(__name__)

_QUOTES_ADAPTER = TypeAdapter(list[RateQuote])


@dataclass(frozen=True)
class RateSource:
    name: str
    url: str
    api_key: str | None = None
    enabled: bool = True


@dataclass(frozen=True)
class RateTrackerConfig:
    sources: list[RateSource] = field(default_factory=list)
    timeout: float = 10.0


def build_rate_tracker_config(settings: Settings) -> RateTrackerConfig:
    """Build the tracker config from application settings."""
    return RateTrackerConfig(
        sources=[
            RateSource(
                name="Federal Reserve",
                url=settings.FEDERAL_RESERVE_API_URL,
                api_key=settings.FEDERAL_RESERVE_API_KEY,
            ),
            RateSource(
                name="Bank Rate API",
                url=settings.BANKRATE_API_URL,
                api_key=settings.BANKRATE_API_KEY,
            ),
        ],
        timeout=settings.RATE_FETCH_TIMEOUT,
    )


class RateTrackerService:
    """Fetches quotes from external rate sources and appends them as observations."""

    def __init__(self, config: RateTrackerConfig, client: httpx.AsyncClient | None = None):
        self.config = config
        self._client = client

    async def _fetch_source(self, client: httpx.AsyncClient, source: RateSource) -> list[RateQuote]:
        headers = {"Authorization": f"Bearer {source.api_key}"} if source.api_key else {}
        response = await client.get(source.url, headers=headers)
        response.raise_for_status()
        return _QUOTES_ADAPTER.validate_python(response.json())

    async def fetch_latest_rates(self) -> FetchSummary:
        """Poll every enabled source once."""
        summary = FetchSummary(fetched_at=datetime.now(UTC))
        client = self._client or httpx.AsyncClient(timeout=self.config.timeout)
        try:
            for source in self.config.sources:
                if not source.enabled:
                    continue
                logger.info("Fetching rates from %s", source.name)
                try:
                    quotes = await self._fetch_source(client, source)
                except (httpx.HTTPError, ValidationError, ValueError) as exc:
                    logger.warning("Rate source %s failed: %s", source.name, exc)
                    summary.errors.append(SourceError(source=source.name, error=str(exc)))
                    continue
                summary.results.append(
                    SourceResult(source=source.name, quotes=quotes, fetched_at=datetime.now(UTC))
                )
        finally:
            if self._client is None:
                await client.aclose()
        return summary


async def process_rates(
    session: AsyncSession,
    results: list[SourceResult],
) -> tuple[list[InterestRate], int]:
    """Append one observation per quote whose product exists in the catalog.

    Quotes are matched to products by name and loan type; unmatched quotes are
    skipped.

    Returns:
        (created observations, number of quotes skipped)
    """
    processed: list[InterestRate] = []
    skipped = 0

    for result in results:
        for quote in result.quotes:
            product_result = await session.execute(
                select(LoanProduct).where(
                    LoanProduct.name == quote.product_name,
                    LoanProduct.loan_type == quote.loan_type,
                )
            )
            product = product_result.scalars().first()
            if product is None:
                logger.info("No matching loan product found for %s", quote.product_name)
                skipped += 1
                continue

            observation = InterestRate(
                loan_product_id=product.id,
                observed_at=result.fetched_at,
                rate=quote.interest_rate,
                term_months=quote.term_months,
                credit_score_min=quote.min_credit_score,
                credit_score_max=quote.max_credit_score,
                conditions=quote.conditions,
            )
            session.add(observation)
            processed.append(observation)

    await session.commit()
    logger.info("Processed %d rates, skipped %d", len(processed), skipped)
    return processed, skipped


async def get_historical_rates(
    session: AsyncSession,
    product_id: int,
    days: int = 30,
) -> list[RateObservation]:
    """Observations for a product in the last ``days`` days, oldest first."""
    cutoff = datetime.now(UTC) - timedelta(days=days)
    stmt = (
        select(InterestRate)
        .where(InterestRate.loan_product_id == product_id, InterestRate.observed_at >= cutoff)
        .order_by(InterestRate.observed_at.asc())
    )
    result = await session.execute(stmt)
    return [RateObservation.model_validate(r) for r in result.scalars().all()]


async def get_rate_trends_by_type(
    session: AsyncSession,
    loan_type: LoanType,
    days: int = 90,
) -> list[RateTrendPoint]:
    """Daily average/min/max rate across all products of a loan type."""
    cutoff = datetime.now(UTC) - timedelta(days=days)
    day = func.date(InterestRate.observed_at)
    stmt = (
        select(
            day.label("day"),
            func.avg(InterestRate.rate),
            func.min(InterestRate.rate),
            func.max(InterestRate.rate),
            func.count(InterestRate.id),
        )
        .join(LoanProduct, LoanProduct.id == InterestRate.loan_product_id)
        .where(LoanProduct.loan_type == loan_type, InterestRate.observed_at >= cutoff)
        .group_by(day)
        .order_by(day)
    )
    result = await session.execute(stmt)
    return [
        RateTrendPoint(
            day=row[0],
            average_rate=float(row[1]),
            min_rate=float(row[2]),
            max_rate=float(row[3]),
            count=row[4],
        )
        for row in result.all()
    ]
