# This project was developed with assistance from AI tools.
"""Tests for per-product metric calculation."""

from datetime import UTC, datetime

import pytest
from factories import (
    FixedRatingSource,
    InMemoryLoanCatalog,
    make_institution,
    make_product,
    make_rate,
)

from lendscope.services.metrics import (
    ReviewScoreRating,
    assess_approval_likelihood,
    assess_flexibility,
    calculate_metrics,
    estimate_apr,
)

# ---------------------------------------------------------------------------
# Individual metrics
# ---------------------------------------------------------------------------


def test_apr_adds_markup_for_fees():
    assert estimate_apr(4.5, make_product(has_fees=True)) == pytest.approx(5.0)
    assert estimate_apr(4.5, make_product(has_fees=False)) == 4.5


def test_flexibility_base_score():
    assert assess_flexibility(make_product(perks=["Rate lock guarantee"])) == 0.5


def test_flexibility_phrases_are_case_insensitive():
    product = make_product(perks=["No Prepayment Penalty", "Flexible PAYMENT OPTIONS"])
    assert assess_flexibility(product) == pytest.approx(0.9)


def test_flexibility_phrase_counted_once():
    product = make_product(perks=["No prepayment penalty", "No prepayment fee either"])
    assert assess_flexibility(product) == pytest.approx(0.7)


@pytest.mark.parametrize(
    "low,high,expected",
    [(650, 850, 1.0), (700, 800, 0.5), (600, 900, 1.0), (800, 700, 0.0), (720, 720, 0.0)],
)
def test_approval_likelihood_clamped(low, high, expected):
    assert assess_approval_likelihood(low, high) == pytest.approx(expected)


def test_review_score_rating_scales_to_unit_interval():
    rating = ReviewScoreRating(fallback=0.75)
    assert rating.rating_for(make_institution(review_score=4.0)) == pytest.approx(0.8)
    assert rating.rating_for(make_institution(review_score=5.0)) == 1.0


def test_review_score_rating_fallback():
    rating = ReviewScoreRating(fallback=0.6)
    assert rating.rating_for(make_institution(review_score=None)) == 0.6
    assert rating.rating_for(None) == 0.6


def test_review_score_rating_is_deterministic():
    rating = ReviewScoreRating(fallback=0.75)
    institution = make_institution(review_score=3.7)
    assert rating.rating_for(institution) == rating.rating_for(institution)


# ---------------------------------------------------------------------------
# calculate_metrics
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_calculate_metrics_prices_each_product():
    products = [make_product(id=1), make_product(id=2, has_fees=True)]
    catalog = InMemoryLoanCatalog(
        products, [make_rate(1, 4.5, 650, 850), make_rate(2, 4.35, 700, 800)],
    )

    analyzed, skipped = await calculate_metrics(
        catalog, products, 250_000, 360, 720, FixedRatingSource(0.9),
    )

    assert skipped == 0
    assert [a.product.id for a in analyzed] == [1, 2]
    first, second = analyzed
    assert first.monthly_payment == pytest.approx(1266.71, abs=0.01)
    assert first.apr == 4.5
    assert first.approval_likelihood == 1.0
    assert first.customer_service == 0.9
    assert second.apr == pytest.approx(4.85)
    assert second.approval_likelihood == pytest.approx(0.5)
    assert second.credit_score_range.min == 700


@pytest.mark.asyncio
async def test_calculate_metrics_uses_latest_applicable_rate():
    products = [make_product(id=1)]
    catalog = InMemoryLoanCatalog(
        products,
        [
            make_rate(1, 5.0, observed_at=datetime(2026, 1, 1, tzinfo=UTC)),
            make_rate(1, 4.0, observed_at=datetime(2026, 2, 1, tzinfo=UTC)),
            make_rate(1, 3.0, 800, 850, observed_at=datetime(2026, 3, 1, tzinfo=UTC)),
        ],
    )

    analyzed, _ = await calculate_metrics(
        catalog, products, 100_000, 360, 700, FixedRatingSource(),
    )

    assert analyzed[0].interest_rate == 4.0


@pytest.mark.asyncio
async def test_missing_rate_is_skipped_and_counted():
    products = [make_product(id=1), make_product(id=2), make_product(id=3)]
    catalog = InMemoryLoanCatalog(products, [make_rate(1), make_rate(3)])

    analyzed, skipped = await calculate_metrics(
        catalog, products, 100_000, 360, 700, FixedRatingSource(),
    )

    assert [a.product.id for a in analyzed] == [1, 3]
    assert skipped == 1


@pytest.mark.asyncio
async def test_failed_rate_lookup_is_skipped_not_raised():
    products = [make_product(id=1), make_product(id=2)]
    catalog = InMemoryLoanCatalog(
        products, [make_rate(1), make_rate(2)], failing_products={1},
    )

    analyzed, skipped = await calculate_metrics(
        catalog, products, 100_000, 360, 700, FixedRatingSource(),
    )

    assert [a.product.id for a in analyzed] == [2]
    assert skipped == 1
    assert catalog.rate_lookups == [1, 2]
