# This project was developed with assistance from AI tools.
"""Eligibility filtering over an in-memory product catalog.

These predicates are the reference definition of "eligible". The SQL catalog
restates them as WHERE clauses, and tests check the two agree at the band
edges. Output always preserves catalog order.
"""

from collections.abc import Iterable

from lendscope_db.enums import LoanType

from ..schemas.products import LoanProductInfo


def admits_amount(product: LoanProductInfo, amount: float) -> bool:
    if amount < product.min_amount:
        return False
    return product.max_amount is None or amount <= product.max_amount


def admits_term(product: LoanProductInfo, term_months: int, band: int = 0) -> bool:
    """Whether the product's term bounds, widened by ``band`` months, contain the term."""
    if term_months + band < product.min_term:
        return False
    return product.max_term is None or term_months - band <= product.max_term


def admits_credit_score(product: LoanProductInfo, credit_score: int, band: int = 0) -> bool:
    """Whether the borrower meets the minimum score, allowing ``band`` points of slack.

    Products without a minimum credit score accept everyone.
    """
    if product.min_credit_score is None:
        return True
    return product.min_credit_score <= credit_score + band


def is_eligible(
    product: LoanProductInfo,
    loan_type: LoanType,
    amount: float,
    term_months: int,
    credit_score: int,
) -> bool:
    return (
        product.active
        and product.loan_type == loan_type
        and admits_amount(product, amount)
        and admits_term(product, term_months)
        and admits_credit_score(product, credit_score)
    )


def filter_eligible(
    catalog: Iterable[LoanProductInfo],
    loan_type: LoanType,
    amount: float,
    term_months: int,
    credit_score: int,
) -> list[LoanProductInfo]:
    """Return the catalog subset that admits the request, in catalog order."""
    return [
        p for p in catalog if is_eligible(p, loan_type, amount, term_months, credit_score)
    ]


def filter_lower_credit(
    catalog: Iterable[LoanProductInfo],
    loan_type: LoanType,
    amount: float,
    term_months: int,
    credit_score: int,
    *,
    band: int,
    limit: int,
) -> list[LoanProductInfo]:
    """Products that would be eligible if the borrower had ``band`` more credit points."""
    matches = [
        p
        for p in catalog
        if p.active
        and p.loan_type == loan_type
        and admits_amount(p, amount)
        and admits_term(p, term_months)
        and admits_credit_score(p, credit_score, band)
    ]
    return matches[:limit]


def filter_different_term(
    catalog: Iterable[LoanProductInfo],
    loan_type: LoanType,
    amount: float,
    term_months: int,
    credit_score: int,
    *,
    band: int,
    limit: int,
) -> list[LoanProductInfo]:
    """Products that would be eligible for a term within ``band`` months of the request."""
    matches = [
        p
        for p in catalog
        if p.active
        and p.loan_type == loan_type
        and admits_amount(p, amount)
        and admits_term(p, term_months, band)
        and admits_credit_score(p, credit_score)
    ]
    return matches[:limit]
