# This project was developed with assistance from AI tools.
"""Shared FastAPI dependencies for the route modules.

Tests swap these out through ``app.dependency_overrides``.
"""

from fastapi import Depends
from lendscope_db import get_db
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.config import settings
from ..services.catalog import SqlLoanCatalog
from ..services.metrics import ReviewScoreRating
from ..services.rate_tracker import RateTrackerService, build_rate_tracker_config


async def get_loan_catalog(session: AsyncSession = Depends(get_db)) -> SqlLoanCatalog:
    return SqlLoanCatalog(session)


def get_rating_source() -> ReviewScoreRating:
    return ReviewScoreRating(fallback=settings.DEFAULT_SERVICE_RATING)


def get_rate_tracker() -> RateTrackerService:
    return RateTrackerService(build_rate_tracker_config(settings))
