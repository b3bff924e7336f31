# This project was developed with assistance from AI tools.
"""Loan analysis pipeline.

eligibility -> metrics -> ranking -> recommendations/insights. Every call
builds its own derived objects; nothing is cached between requests.
"""

import logging

from lendscope_db.enums import LoanType

from ..core.config import settings
from ..schemas.analysis import (
    AnalysisFailure,
    AnalysisRequest,
    AnalysisResult,
    Alternative,
)
from .catalog import LoanCatalog
from .education import get_educational_content
from .insights import generate_insights, generate_recommendations
from .metrics import ServiceRatingSource, calculate_metrics
from .ranking import rank_products

logger = logging.getLogger(__name__)

NO_ELIGIBLE_MESSAGE = (
    "No eligible loan products found. Consider improving your credit score or adjusting "
    "loan parameters."
)

# Personal loans at or above this amount also get a home-equity suggestion
HOME_EQUITY_SUGGESTION_MIN_AMOUNT = 25_000


async def suggest_alternatives(
    catalog: LoanCatalog,
    request: AnalysisRequest,
    *,
    credit_band: int,
    term_band: int,
    limit: int,
) -> list[Alternative]:
    """Relaxed-constraint suggestions for a request with no eligible products."""
    alternatives: list[Alternative] = []

    lower_credit = await catalog.find_lower_credit_products(
        request.loan_type,
        request.amount,
        request.term_months,
        request.credit_score,
        band=credit_band,
        limit=limit,
    )
    if lower_credit:
        alternatives.append(
            Alternative(
                type="lower_credit_options",
                title="Options Within Reach of Your Credit Score",
                products=lower_credit,
                description=f"These products require up to {credit_band} more credit points "
                "than your current score.",
            )
        )

    different_term = await catalog.find_different_term_products(
        request.loan_type,
        request.amount,
        request.term_months,
        request.credit_score,
        band=term_band,
        limit=limit,
    )
    if different_term:
        alternatives.append(
            Alternative(
                type="different_term_options",
                title="Options with Different Loan Terms",
                products=different_term,
                description=f"These products are available with a term within {term_band} "
                "months of your request.",
            )
        )

    if (
        request.loan_type == LoanType.PERSONAL
        and request.amount >= HOME_EQUITY_SUGGESTION_MIN_AMOUNT
    ):
        alternatives.append(
            Alternative(
                type="different_loan_type",
                title="Consider a Home Equity Loan",
                description="For larger amounts, a home equity loan might offer lower interest "
                "rates if you own a home with sufficient equity.",
            )
        )

    return alternatives


async def analyze_loan_options(
    catalog: LoanCatalog,
    request: AnalysisRequest,
    rating_source: ServiceRatingSource,
) -> AnalysisResult | AnalysisFailure:
    """Rank the catalog's eligible products for a borrower's request."""
    logger.info(
        "Analyzing %s loan options for $%s over %s months",
        request.loan_type.value,
        request.amount,
        request.term_months,
    )

    eligible = await catalog.find_eligible_products(
        request.loan_type, request.amount, request.term_months, request.credit_score,
    )
    if not eligible:
        logger.info("No eligible %s products, searching alternatives", request.loan_type.value)
        return AnalysisFailure(
            message=NO_ELIGIBLE_MESSAGE,
            alternatives=await suggest_alternatives(
                catalog,
                request,
                credit_band=settings.ALTERNATIVE_CREDIT_BAND,
                term_band=settings.ALTERNATIVE_TERM_BAND,
                limit=settings.ALTERNATIVES_LIMIT,
            ),
        )

    analyzed, skipped = await calculate_metrics(
        catalog,
        eligible,
        request.amount,
        request.term_months,
        request.credit_score,
        rating_source,
    )
    if skipped:
        logger.warning(
            "Skipped %d of %d eligible products without an applicable rate",
            skipped,
            len(eligible),
        )

    ranked = rank_products(analyzed, request.preferences)

    return AnalysisResult(
        recommendations=generate_recommendations(ranked, request),
        top_options=ranked[: settings.TOP_OPTIONS_COUNT],
        all_options=ranked,
        educational_content=get_educational_content(request.loan_type),
        insights=generate_insights(ranked, request),
        skipped_products=skipped,
    )
