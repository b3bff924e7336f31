# This project was developed with assistance from AI tools.
"""Narrative recommendations and insights derived from a ranked product list.

Pure functions over the scored list; the lowest-rate and lowest-payment picks
come from fresh sorts, not from the weighted ranking.
"""

from lendscope_db.enums import LoanType

from ..schemas.analysis import AnalysisRequest, Insight, Recommendations, ScoredProduct

NO_OPTIONS_TEXT = (
    "Based on your criteria, we couldn't find suitable loan options. Consider adjusting "
    "your loan amount, term, or improving your credit score."
)

# Reference average rate and direction per loan type
_RATE_TRENDS: dict[LoanType, tuple[float, str]] = {
    LoanType.MORTGAGE: (5.5, "rising"),
    LoanType.PERSONAL: (8.0, "stable"),
    LoanType.AUTO: (4.0, "rising"),
    LoanType.STUDENT: (5.5, "falling"),
    LoanType.BUSINESS: (7.0, "rising"),
}
_DEFAULT_RATE_TREND = (6.0, "stable")
_RATE_TREND_TOLERANCE = 0.5

MAX_SPECIAL_OFFERS = 3


def _offer_name(option: ScoredProduct) -> str:
    return f"{option.product.institution_name}'s {option.product.name}"


def generate_recommendations(
    ranked: list[ScoredProduct],
    request: AnalysisRequest,
) -> Recommendations:
    """Pick best overall, lowest rate, and lowest payment, and describe them."""
    if not ranked:
        return Recommendations(text=NO_OPTIONS_TEXT)

    best = ranked[0]
    lowest_rate = sorted(ranked, key=lambda p: p.interest_rate)[0]
    lowest_payment = sorted(ranked, key=lambda p: p.monthly_payment)[0]

    parts = [
        f"Based on your {request.loan_type.label} loan request for ${request.amount:,.2f} "
        f"over {request.term_months} months, we recommend {_offer_name(best)}.",
        f"This option offers a competitive rate of {best.interest_rate:.2f}% with a "
        f"monthly payment of ${best.monthly_payment:,.2f}.",
    ]
    if lowest_rate is not best:
        parts.append(
            f"For the absolute lowest interest rate of {lowest_rate.interest_rate:.2f}%, "
            f"consider {_offer_name(lowest_rate)}, though it may have other trade-offs."
        )
    if lowest_payment is not best and lowest_payment is not lowest_rate:
        parts.append(
            f"If minimizing your monthly payment is most important, {_offer_name(lowest_payment)} "
            f"offers the lowest payment at ${lowest_payment.monthly_payment:,.2f}, but you'll "
            "pay more in interest over time."
        )

    return Recommendations(
        best_overall=best,
        lowest_rate=lowest_rate,
        lowest_payment=lowest_payment,
        text=" ".join(parts),
    )


def rate_trend_text(loan_type: LoanType, average_rate: float) -> str:
    reference, direction = _RATE_TRENDS.get(loan_type, _DEFAULT_RATE_TREND)
    if average_rate < reference - _RATE_TREND_TOLERANCE:
        position = "below"
    elif average_rate > reference + _RATE_TREND_TOLERANCE:
        position = "above"
    else:
        position = "around"
    return f"{position} the average rate and is currently {direction}."


def credit_score_text(credit_score: int) -> str:
    if credit_score >= 750:
        return (
            "Your excellent credit score qualifies you for the most competitive rates. "
            "You're in a strong position to negotiate terms."
        )
    if credit_score >= 700:
        return (
            "Your good credit score qualifies you for competitive rates, though you might "
            "not get the absolute lowest rates available."
        )
    if credit_score >= 650:
        return (
            "Your fair credit score limits some options. Improving your score by 50+ points "
            "could save you significantly on interest."
        )
    return (
        "Your credit score is limiting your options and increasing costs. Consider credit "
        "improvement strategies or secured loan options."
    )


def term_text(term_months: int, top: ScoredProduct) -> str:
    years = f"{term_months / 12:g}"
    interest = f"You'll pay approximately ${top.total_interest:,.2f} in interest over the loan life."
    if term_months <= 36:
        lead = f"Your {years}-year term means higher monthly payments but less total interest."
    elif term_months <= 60:
        lead = f"Your {years}-year term balances monthly payments with total interest cost."
    else:
        lead = (
            f"Your {years}-year term gives you lower monthly payments but increases total interest."
        )
    return f"{lead} {interest}"


def special_offers_text(ranked: list[ScoredProduct]) -> str | None:
    """Up to three distinct perks, in the order first seen across candidates."""
    perks = list(dict.fromkeys(perk for p in ranked for perk in p.product.perks))
    if not perks:
        return None
    listed = ", ".join(perks[:MAX_SPECIAL_OFFERS])
    return (
        f"Some institutions offer special benefits including: {listed}. "
        "Consider these perks when making your decision."
    )


def generate_insights(ranked: list[ScoredProduct], request: AnalysisRequest) -> list[Insight]:
    if not ranked:
        return []

    average_rate = sum(p.interest_rate for p in ranked) / len(ranked)
    insights = [
        Insight(
            type="rate_trend",
            title="Interest Rate Trend",
            text=(
                f"The average {request.loan_type.label} loan rate is currently "
                f"{average_rate:.2f}%. This is {rate_trend_text(request.loan_type, average_rate)}"
            ),
        ),
        Insight(
            type="credit_impact",
            title="Credit Score Impact",
            text=credit_score_text(request.credit_score),
        ),
        Insight(
            type="term_impact",
            title="Loan Term Consideration",
            text=term_text(request.term_months, ranked[0]),
        ),
    ]

    offers = special_offers_text(ranked)
    if offers:
        insights.append(Insight(type="special_offers", title="Special Offers", text=offers))

    return insights
