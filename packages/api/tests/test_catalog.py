# This project was developed with assistance from AI tools.
"""Tests for the SQL-backed loan catalog (mocked sessions)."""

from datetime import UTC, datetime
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest
from factories import make_mock_session
from lendscope_db.enums import LoanType
from sqlalchemy.exc import OperationalError

from lendscope.services.catalog import CatalogError, SqlLoanCatalog, get_product, list_products


def _product_row(id=1, **overrides):
    fields = {
        "id": id,
        "institution_id": 10,
        "institution": SimpleNamespace(
            id=10, name="First National Bank", description=None, website=None,
            logo_url=None, types=["bank"], review_score=4.1, active=True,
        ),
        "name": "30-Year Fixed Mortgage",
        "loan_type": LoanType.MORTGAGE,
        "description": None,
        "min_amount": 50_000,
        "max_amount": 1_500_000,
        "min_term": 120,
        "max_term": 360,
        "base_rate": 4.5,
        "variable_rate": False,
        "has_fees": True,
        "min_credit_score": 680,
        "perks": ["No origination fee"],
        "requirements": [],
        "processing_time": "2-3 business days",
        "active": True,
    }
    fields.update(overrides)
    return SimpleNamespace(**fields)


def _rate_row(**overrides):
    fields = {
        "id": 7,
        "loan_product_id": 1,
        "observed_at": datetime(2026, 3, 1, tzinfo=UTC),
        "rate": 4.5,
        "term_months": 360,
        "credit_score_min": 680,
        "credit_score_max": 850,
        "conditions": {},
    }
    fields.update(overrides)
    return SimpleNamespace(**fields)


@pytest.mark.asyncio
async def test_find_eligible_products_converts_rows():
    session = make_mock_session(items=[_product_row(1), _product_row(2, name="Jumbo")])
    catalog = SqlLoanCatalog(session)

    products = await catalog.find_eligible_products(LoanType.MORTGAGE, 250_000, 360, 700)

    assert [p.name for p in products] == ["30-Year Fixed Mortgage", "Jumbo"]
    assert products[0].institution_name == "First National Bank"
    assert products[0].institution.review_score == 4.1
    session.execute.assert_awaited_once()


@pytest.mark.asyncio
async def test_latest_rate_found():
    session = make_mock_session(single=_rate_row())
    rate = await SqlLoanCatalog(session).latest_rate(1, 700)
    assert rate.rate == 4.5
    assert rate.applies_to(700)


@pytest.mark.asyncio
async def test_latest_rate_missing():
    session = make_mock_session(single=None)
    assert await SqlLoanCatalog(session).latest_rate(1, 700) is None


@pytest.mark.asyncio
async def test_query_failure_raises_catalog_error():
    session = AsyncMock()
    session.execute = AsyncMock(side_effect=OperationalError("SELECT", {}, Exception("down")))

    with pytest.raises(CatalogError):
        await SqlLoanCatalog(session).latest_rate(1, 700)
    with pytest.raises(CatalogError):
        await SqlLoanCatalog(session).find_eligible_products(LoanType.AUTO, 10_000, 36, 700)


@pytest.mark.asyncio
async def test_get_product_not_found_returns_none():
    session = make_mock_session(single=None)
    assert await get_product(session, 999) is None


@pytest.mark.asyncio
async def test_list_products():
    session = make_mock_session(items=[_product_row(1)])
    products = await list_products(session, LoanType.MORTGAGE)
    assert len(products) == 1
    assert products[0].loan_type == LoanType.MORTGAGE
