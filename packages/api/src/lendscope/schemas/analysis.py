# This project was developed with assistance from AI tools.
"""Loan analysis request/response schemas.

``AnalyzedProduct`` and ``ScoredProduct`` are request-scoped: built fresh for
every analysis call and never persisted.
"""

from typing import Literal

from lendscope_db.enums import LoanType
from pydantic import BaseModel, Field

from ..core.config import settings
from . import Currency, LoanAmount
from .education import EducationalContent
from .products import LoanProductInfo


class AnalysisPreferences(BaseModel):
    """Borrower priorities; each flag raises the weight of one metric."""

    prioritize_rate: bool = False
    prioritize_payment: bool = False
    prioritize_service: bool = False
    prioritize_flexibility: bool = False
    prioritize_approval: bool = False


class AnalysisRequest(BaseModel):
    loan_type: LoanType
    amount: LoanAmount
    term_months: int = Field(gt=0, le=600)
    credit_score: int = Field(
        default_factory=lambda: settings.DEFAULT_CREDIT_SCORE, ge=300, le=850,
    )
    preferences: AnalysisPreferences = Field(default_factory=AnalysisPreferences)


class CreditScoreRange(BaseModel):
    min: int
    max: int


class AnalyzedProduct(BaseModel):
    """A product priced at its matched rate, with auxiliary scores."""

    product: LoanProductInfo
    interest_rate: float
    credit_score_range: CreditScoreRange
    monthly_payment: Currency
    total_payment: Currency
    total_interest: Currency
    apr: float
    flexibility: float
    customer_service: float
    approval_likelihood: float


class MetricScores(BaseModel):
    """Per-metric scores in [0, 1]; higher is better for every metric."""

    interest_rate: float
    monthly_payment: float
    customer_service: float
    flexibility: float
    approval_likelihood: float


class ScoredProduct(AnalyzedProduct):
    scores: MetricScores
    total_score: float


class Recommendations(BaseModel):
    best_overall: ScoredProduct | None = None
    lowest_rate: ScoredProduct | None = None
    lowest_payment: ScoredProduct | None = None
    text: str


class Insight(BaseModel):
    type: Literal["rate_trend", "credit_impact", "term_impact", "special_offers"]
    title: str
    text: str


class Alternative(BaseModel):
    """A relaxed-constraint suggestion offered when nothing is eligible."""

    type: Literal["lower_credit_options", "different_term_options", "different_loan_type"]
    title: str
    products: list[LoanProductInfo] = Field(default_factory=list)
    description: str | None = None


class AnalysisResult(BaseModel):
    success: Literal[True] = True
    recommendations: Recommendations
    top_options: list[ScoredProduct]
    all_options: list[ScoredProduct]
    educational_content: EducationalContent
    insights: list[Insight]
    skipped_products: int = Field(
        default=0,
        description="Eligible products left out because no applicable rate was found.",
    )


class AnalysisFailure(BaseModel):
    success: Literal[False] = False
    message: str
    alternatives: list[Alternative] = Field(default_factory=list)
