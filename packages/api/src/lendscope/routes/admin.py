# This project was developed with assistance from AI tools.
"""Admin endpoints for demo catalog seeding and rate ingestion."""

from datetime import UTC, datetime

from fastapi import APIRouter, Depends, status
from lendscope_db import get_db
from lendscope_db.enums import UserRole
from sqlalchemy.ext.asyncio import AsyncSession

from ..middleware.auth import require_roles
from ..schemas.admin import SeedResponse, SeedStatusResponse
from ..schemas.rates import RateIngestRequest, RateIngestResponse, SourceResult
from ..services.rate_tracker import RateTrackerService, process_rates
from ..services.seed.seeder import get_seed_status, seed_demo_data
from ._deps import get_rate_tracker

router = APIRouter(dependencies=[Depends(require_roles(UserRole.ADMIN))])


@router.post("/seed", response_model=SeedResponse, status_code=status.HTTP_200_OK)
async def seed_data(
    force: bool = False,
    session: AsyncSession = Depends(get_db),
) -> SeedResponse:
    """Seed the demo catalog. Pass force=true to re-seed.

    Simulated for demonstration purposes -- not real financial data.
    """
    result = await seed_demo_data(session, force=force)
    return SeedResponse(**result)


@router.get("/seed/status", response_model=SeedStatusResponse)
async def seed_status(
    session: AsyncSession = Depends(get_db),
) -> SeedStatusResponse:
    """Check if the demo catalog has been seeded."""
    result = await get_seed_status(session)
    return SeedStatusResponse(**result)


@router.post("/rates", response_model=RateIngestResponse, status_code=status.HTTP_201_CREATED)
async def ingest_rates(
    req: RateIngestRequest,
    session: AsyncSession = Depends(get_db),
) -> RateIngestResponse:
    """Append manually supplied rate quotes as new observations."""
    result = SourceResult(source=req.source, quotes=req.quotes, fetched_at=datetime.now(UTC))
    processed, skipped = await process_rates(session, [result])
    return RateIngestResponse(processed=len(processed), skipped=skipped)


@router.post("/rates/refresh", response_model=RateIngestResponse)
async def refresh_rates(
    session: AsyncSession = Depends(get_db),
    tracker: RateTrackerService = Depends(get_rate_tracker),
) -> RateIngestResponse:
    """Poll the configured rate sources once and store what they return.

    Failing sources are reported in ``errors``; the rest are still stored.
    """
    summary = await tracker.fetch_latest_rates()
    processed, skipped = await process_rates(session, summary.results)
    return RateIngestResponse(processed=len(processed), skipped=skipped, errors=summary.errors)
