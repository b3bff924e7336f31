# This project was developed with assistance from AI tools.
"""Amortization math.

Pure math, no I/O. Shared by the payment calculator route, offer comparison,
and the loan analysis metric calculator. Results are unrounded; rounding to
cents happens when response schemas serialize.
"""

import math
from typing import NamedTuple


class InvalidLoanParametersError(ValueError):
    """Raised when principal, rate, or term cannot produce a payment."""

    pass


class PaymentBreakdown(NamedTuple):
    monthly_payment: float
    total_payment: float
    total_interest: float


def monthly_payment(principal: float, annual_rate: float, term_months: int) -> float:
    """Standard amortized payment: P * r(1+r)^n / ((1+r)^n - 1).

    A zero rate degenerates to straight-line repayment (P / n).
    """
    if not (math.isfinite(principal) and math.isfinite(annual_rate)):
        raise InvalidLoanParametersError("Principal and interest rate must be finite numbers")
    if principal <= 0:
        raise InvalidLoanParametersError("Principal must be positive")
    if term_months <= 0:
        raise InvalidLoanParametersError("Term must be a positive number of months")
    if annual_rate < 0:
        raise InvalidLoanParametersError("Interest rate cannot be negative")

    monthly_rate = annual_rate / 100 / 12
    if monthly_rate == 0:
        return principal / term_months

    try:
        compound = (1 + monthly_rate) ** term_months
    except OverflowError as exc:
        raise InvalidLoanParametersError("Interest rate and term overflow the payment") from exc
    return principal * monthly_rate * compound / (compound - 1)


def amortize(principal: float, annual_rate: float, term_months: int) -> PaymentBreakdown:
    """Return monthly payment, total paid, and total interest for a loan."""
    payment = monthly_payment(principal, annual_rate, term_months)
    total_payment = payment * term_months
    if not math.isfinite(total_payment):
        raise InvalidLoanParametersError("Loan is too large to amortize")
    return PaymentBreakdown(
        monthly_payment=payment,
        total_payment=total_payment,
        total_interest=total_payment - principal,
    )
