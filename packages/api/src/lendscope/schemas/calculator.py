# This project was developed with assistance from AI tools.
"""Payment calculator and offer comparison schemas."""

from lendscope_db.enums import LoanType
from pydantic import BaseModel, Field

from . import AnnualRate, Currency, LoanAmount


class PaymentRequest(BaseModel):
    """Input for the loan payment calculator."""

    amount: LoanAmount
    annual_rate: AnnualRate
    term_months: int = Field(gt=0, le=600)


class PaymentResponse(BaseModel):
    """Amortized payment breakdown."""

    monthly_payment: Currency
    total_payment: Currency
    total_interest: Currency


class InstitutionOffer(BaseModel):
    """Rates one institution quotes, keyed by loan type."""

    institution_name: str
    rates: dict[LoanType, AnnualRate] = Field(min_length=1)
    min_credit_score: int | None = None
    processing_time: str | None = None
    perks: list[str] = Field(default_factory=list)


class CompareOffersRequest(BaseModel):
    loan_type: LoanType
    amount: LoanAmount
    term_months: int = Field(gt=0, le=600)
    offers: list[InstitutionOffer] = Field(min_length=1)


class OfferComparison(BaseModel):
    """One institution's offer priced for the requested loan."""

    institution_name: str
    rate: float
    monthly_payment: Currency
    total_payment: Currency
    total_interest: Currency
    min_credit_score: int | None = None
    processing_time: str | None = None
    perks: list[str] = Field(default_factory=list)


class CompareOffersResponse(BaseModel):
    loan_type: LoanType
    amount: float
    term_months: int
    comparisons: list[OfferComparison]
