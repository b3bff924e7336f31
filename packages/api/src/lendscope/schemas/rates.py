# This project was developed with assistance from AI tools.
"""Rate history, trend, and ingestion schemas."""

from datetime import date, datetime

from lendscope_db.enums import LoanType
from pydantic import AliasChoices, BaseModel, Field


class RateTrendPoint(BaseModel):
    """Daily rate aggregate across all products of one loan type."""

    day: date
    average_rate: float
    min_rate: float
    max_rate: float
    count: int


class RateQuote(BaseModel):
    """One product rate as published by an external rate source.

    Sources publish camelCase keys; both spellings are accepted.
    """

    product_name: str = Field(validation_alias=AliasChoices("product_name", "productName"))
    loan_type: LoanType = Field(validation_alias=AliasChoices("loan_type", "loanType"))
    interest_rate: float = Field(
        ge=0, le=100, validation_alias=AliasChoices("interest_rate", "interestRate"),
    )
    term_months: int = Field(gt=0, validation_alias=AliasChoices("term_months", "termMonths"))
    min_credit_score: int = Field(
        default=0, ge=0, validation_alias=AliasChoices("min_credit_score", "minCreditScore"),
    )
    max_credit_score: int = Field(
        default=850, le=850, validation_alias=AliasChoices("max_credit_score", "maxCreditScore"),
    )
    conditions: dict[str, str] = Field(default_factory=dict)


class SourceResult(BaseModel):
    source: str
    quotes: list[RateQuote]
    fetched_at: datetime


class SourceError(BaseModel):
    source: str
    error: str


class FetchSummary(BaseModel):
    """Outcome of polling every enabled rate source once."""

    results: list[SourceResult] = Field(default_factory=list)
    errors: list[SourceError] = Field(default_factory=list)
    fetched_at: datetime


class RateIngestRequest(BaseModel):
    source: str = "manual"
    quotes: list[RateQuote] = Field(min_length=1)


class RateIngestResponse(BaseModel):
    processed: int
    skipped: int
    errors: list[SourceError] = Field(default_factory=list)
