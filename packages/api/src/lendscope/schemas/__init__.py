# This project was developed with assistance from AI tools.
"""Shared schema components."""

from typing import Annotated

from pydantic import Field, PlainSerializer

MAX_LOAN_AMOUNT = 100_000_000

# Currency values are carried unrounded and rounded to cents only when serialized.
Currency = Annotated[float, PlainSerializer(lambda v: round(v, 2), return_type=float)]

LoanAmount = Annotated[float, Field(gt=0, le=MAX_LOAN_AMOUNT, allow_inf_nan=False)]
AnnualRate = Annotated[float, Field(ge=0, le=100, allow_inf_nan=False)]
