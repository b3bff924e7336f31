# This project was developed with assistance from AI tools.
"""Side-by-side comparison of institution offers for one loan."""

from ..schemas.calculator import CompareOffersRequest, OfferComparison
from .amortization import amortize


def compare_offers(req: CompareOffersRequest) -> list[OfferComparison]:
    """Price every offer that quotes the requested loan type, cheapest payment first.

    Offers without a rate for the loan type are left out.
    """
    comparisons = []
    for offer in req.offers:
        rate = offer.rates.get(req.loan_type)
        if rate is None:
            continue
        payment = amortize(req.amount, rate, req.term_months)
        comparisons.append(
            OfferComparison(
                institution_name=offer.institution_name,
                rate=rate,
                monthly_payment=payment.monthly_payment,
                total_payment=payment.total_payment,
                total_interest=payment.total_interest,
                min_credit_score=offer.min_credit_score,
                processing_time=offer.processing_time,
                perks=offer.perks,
            )
        )

    comparisons.sort(key=lambda c: c.monthly_payment)
    return comparisons
