# This project was developed with assistance from AI tools.
"""Liveness and readiness probes."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from lendscope_db import get_db
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.config import settings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/")
async def health() -> dict[str, str]:
    """Liveness: the process is up."""
    return {"status": "ok", "service": settings.APP_NAME}


@router.get("/ready")
async def ready(session: AsyncSession = Depends(get_db)) -> dict[str, str]:
    """Readiness: the catalog database answers queries."""
    try:
        await session.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.error("Readiness check failed: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Database unavailable",
        ) from exc
    return {"status": "ready", "database": "ok"}
