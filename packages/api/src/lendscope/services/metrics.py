# This project was developed with assistance from AI tools.
"""Per-product metric calculation for loan analysis.

Each eligible product is priced at its latest applicable rate and given four
auxiliary scores. Products without an applicable rate (or whose rate lookup
fails) are skipped and counted so callers can detect degraded coverage.
"""

import logging
from typing import Protocol

from ..schemas.analysis import AnalyzedProduct, CreditScoreRange
from ..schemas.products import InstitutionInfo, LoanProductInfo
from .amortization import amortize
from .catalog import CatalogError, LoanCatalog

logger = logging.getLogger(__name__)

FEE_APR_MARKUP = 0.5

_FLEXIBILITY_BASE = 0.5
_FLEXIBILITY_BONUS = 0.2
_FLEXIBLE_PERK_PHRASES = ("no prepayment", "payment options")

# Width of the credit band that maps to full approval confidence
_APPROVAL_BAND_WIDTH = 200

_MAX_REVIEW_SCORE = 5.0


class ServiceRatingSource(Protocol):
    def rating_for(self, institution: InstitutionInfo | None) -> float:
        """Return a customer-service score in [0, 1]."""
        ...


class ReviewScoreRating:
    """Customer-service score from the institution's stored review average.

    Institutions without reviews get ``fallback`` so they neither win nor lose
    on this metric.
    """

    def __init__(self, fallback: float):
        self.fallback = fallback

    def rating_for(self, institution: InstitutionInfo | None) -> float:
        if institution is None or institution.review_score is None:
            return self.fallback
        return min(max(institution.review_score / _MAX_REVIEW_SCORE, 0.0), 1.0)


def estimate_apr(rate: float, product: LoanProductInfo) -> float:
    """Placeholder APR: the rate plus a flat markup when the product charges fees."""
    return rate + FEE_APR_MARKUP if product.has_fees else rate


def assess_flexibility(product: LoanProductInfo) -> float:
    score = _FLEXIBILITY_BASE
    perks = [perk.lower() for perk in product.perks]
    for phrase in _FLEXIBLE_PERK_PHRASES:
        if any(phrase in perk for perk in perks):
            score += _FLEXIBILITY_BONUS
    return min(score, 1.0)


def assess_approval_likelihood(credit_score_min: int, credit_score_max: int) -> float:
    """Wider qualifying credit bands read as better approval odds."""
    spread = (credit_score_max - credit_score_min) / _APPROVAL_BAND_WIDTH
    return min(max(spread, 0.0), 1.0)


async def calculate_metrics(
    catalog: LoanCatalog,
    products: list[LoanProductInfo],
    amount: float,
    term_months: int,
    credit_score: int,
    rating_source: ServiceRatingSource,
) -> tuple[list[AnalyzedProduct], int]:
    """Price each product at its latest applicable rate.

    Lookups run sequentially in catalog order.

    Returns:
        (analyzed products in catalog order, number of products skipped)
    """
    analyzed: list[AnalyzedProduct] = []
    skipped = 0

    for product in products:
        try:
            rate = await catalog.latest_rate(product.id, credit_score)
        except CatalogError:
            logger.warning("Rate lookup failed for product %s, skipping", product.id, exc_info=True)
            skipped += 1
            continue

        if rate is None:
            logger.info("No rate for product %s at credit score %s", product.id, credit_score)
            skipped += 1
            continue

        payment = amortize(amount, rate.rate, term_months)
        analyzed.append(
            AnalyzedProduct(
                product=product,
                interest_rate=rate.rate,
                credit_score_range=CreditScoreRange(
                    min=rate.credit_score_min, max=rate.credit_score_max,
                ),
                monthly_payment=payment.monthly_payment,
                total_payment=payment.total_payment,
                total_interest=payment.total_interest,
                apr=estimate_apr(rate.rate, product),
                flexibility=assess_flexibility(product),
                customer_service=rating_source.rating_for(product.institution),
                approval_likelihood=assess_approval_likelihood(
                    rate.credit_score_min, rate.credit_score_max,
                ),
            )
        )

    return analyzed, skipped
