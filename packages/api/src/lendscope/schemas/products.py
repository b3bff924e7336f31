# This project was developed with assistance from AI tools.
"""Catalog schemas: institutions, loan products, rate observations."""

from datetime import datetime

from lendscope_db.enums import InstitutionType, LoanType
from pydantic import BaseModel, ConfigDict, Field


class InstitutionInfo(BaseModel):
    """Lending institution for public display."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str | None = None
    website: str | None = None
    logo_url: str | None = None
    types: list[InstitutionType] = Field(default_factory=lambda: [InstitutionType.OTHER])
    review_score: float | None = None
    active: bool = True


class LoanProductInfo(BaseModel):
    """Loan product with its owning institution attached."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    institution_id: int
    institution: InstitutionInfo | None = None
    name: str
    loan_type: LoanType
    description: str | None = None
    min_amount: float = 0
    max_amount: float | None = None
    min_term: int = 1
    max_term: int | None = None
    base_rate: float
    variable_rate: bool = False
    has_fees: bool = False
    min_credit_score: int | None = None
    perks: list[str] = Field(default_factory=list)
    requirements: list[str] = Field(default_factory=list)
    processing_time: str | None = None
    active: bool = True

    @property
    def institution_name(self) -> str:
        return self.institution.name if self.institution else "Unknown institution"


class RateObservation(BaseModel):
    """A dated rate for a product, valid for a credit-score band."""

    model_config = ConfigDict(from_attributes=True)

    id: int | None = None
    loan_product_id: int
    observed_at: datetime
    rate: float
    term_months: int
    credit_score_min: int = 0
    credit_score_max: int = 850
    conditions: dict[str, str] = Field(default_factory=dict)

    def applies_to(self, credit_score: int) -> bool:
        """Whether the observation's credit band contains the score (inclusive)."""
        return self.credit_score_min <= credit_score <= self.credit_score_max
