# This project was developed with assistance from AI tools.
"""
Demo catalog fixtures for Lendscope.

All fixture data is defined as Python dicts so enums can be referenced directly
and type-checked. Rate observations are dated relative to seeding time so the
history and trend endpoints always have recent data.

Simulated for demonstration purposes -- not real financial data.
"""

import hashlib
import json
from datetime import UTC, datetime, timedelta

from lendscope_db.enums import InstitutionType, LoanType

# ---------------------------------------------------------------------------
# Timestamp helpers
# ---------------------------------------------------------------------------

_NOW = datetime.now(UTC)


def _days_ago(n: int) -> datetime:
    return _NOW - timedelta(days=n)


# ---------------------------------------------------------------------------
# Institutions
# ---------------------------------------------------------------------------

INSTITUTIONS: list[dict] = [
    {
        "key": "first_national",
        "name": "First National Bank",
        "description": "Full-service national bank with branch and online lending.",
        "website": "https://firstnational.example.com",
        "contact_phone": "800-555-0101",
        "types": [InstitutionType.BANK],
        "review_score": 4.1,
    },
    {
        "key": "community_cu",
        "name": "Community Credit Union",
        "description": "Member-owned credit union serving the local community.",
        "website": "https://communitycu.example.com",
        "contact_phone": "800-555-0102",
        "types": [InstitutionType.CREDIT_UNION],
        "review_score": 4.6,
    },
    {
        "key": "global_financial",
        "name": "Global Financial",
        "description": "Lender focused on mortgage and business financing.",
        "website": "https://globalfinancial.example.com",
        "contact_phone": "800-555-0103",
        "types": [InstitutionType.BANK, InstitutionType.MORTGAGE_COMPANY],
        "review_score": 3.8,
    },
    {
        "key": "swift_lending",
        "name": "Swift Online Lending",
        "description": "Online-only lender with fast personal and auto loan decisions.",
        "website": "https://swiftlending.example.com",
        "types": [InstitutionType.ONLINE_LENDER],
        "review_score": None,
    },
]

# ---------------------------------------------------------------------------
# Products -- each carries its rate history as (days_ago, rate, min, max)
# ---------------------------------------------------------------------------

PRODUCTS: list[dict] = [
    {
        "institution_ref": "first_national",
        "name": "30-Year Fixed Mortgage",
        "loan_type": LoanType.MORTGAGE,
        "min_amount": 50_000,
        "max_amount": 1_500_000,
        "min_term": 120,
        "max_term": 360,
        "base_rate": 4.5,
        "min_credit_score": 680,
        "has_fees": True,
        "perks": ["No origination fee", "0.25% rate discount with autopay"],
        "requirements": ["Proof of income", "Property appraisal"],
        "processing_time": "2-3 business days",
        "rates": [(45, 4.62, 680, 850), (14, 4.55, 680, 850), (1, 4.5, 680, 850)],
    },
    {
        "institution_ref": "community_cu",
        "name": "Member Mortgage",
        "loan_type": LoanType.MORTGAGE,
        "min_amount": 25_000,
        "max_amount": 1_000_000,
        "min_term": 60,
        "max_term": 360,
        "base_rate": 4.35,
        "min_credit_score": 650,
        "perks": ["No prepayment penalty", "Financial education resources"],
        "requirements": ["Credit union membership", "Proof of income"],
        "processing_time": "1-2 business days",
        "rates": [(40, 4.41, 620, 850), (10, 4.38, 620, 850), (2, 4.35, 620, 850)],
    },
    {
        "institution_ref": "global_financial",
        "name": "Global Home Loan",
        "loan_type": LoanType.MORTGAGE,
        "min_amount": 100_000,
        "max_amount": None,
        "min_term": 180,
        "max_term": 360,
        "base_rate": 4.6,
        "min_credit_score": 720,
        "variable_rate": True,
        "perks": ["Rate lock guarantee", "Relationship discounts"],
        "requirements": ["Proof of income", "Two years of tax returns"],
        "processing_time": "3-5 business days",
        "rates": [(30, 4.7, 700, 850), (3, 4.6, 700, 850)],
    },
    {
        "institution_ref": "first_national",
        "name": "Personal Loan",
        "loan_type": LoanType.PERSONAL,
        "min_amount": 1_000,
        "max_amount": 50_000,
        "min_term": 12,
        "max_term": 60,
        "base_rate": 7.2,
        "min_credit_score": 680,
        "perks": ["No origination fee"],
        "requirements": ["Proof of income"],
        "processing_time": "2-3 business days",
        "rates": [(20, 7.3, 680, 850), (2, 7.2, 680, 850)],
    },
    {
        "institution_ref": "community_cu",
        "name": "Signature Loan",
        "loan_type": LoanType.PERSONAL,
        "min_amount": 500,
        "max_amount": 30_000,
        "min_term": 6,
        "max_term": 72,
        "base_rate": 6.9,
        "min_credit_score": 640,
        "perks": ["No prepayment penalty", "Flexible payment options"],
        "requirements": ["Credit union membership"],
        "processing_time": "1-2 business days",
        "rates": [(25, 7.0, 600, 850), (5, 6.9, 600, 850)],
    },
    {
        "institution_ref": "swift_lending",
        "name": "Swift Personal",
        "loan_type": LoanType.PERSONAL,
        "min_amount": 2_000,
        "max_amount": 40_000,
        "min_term": 24,
        "max_term": 60,
        "base_rate": 8.4,
        "min_credit_score": 600,
        "has_fees": True,
        "perks": ["Funding in 24 hours"],
        "requirements": ["Bank account"],
        "processing_time": "Same day",
        "rates": [(15, 8.6, 600, 720), (1, 8.4, 600, 720), (1, 7.9, 721, 850)],
    },
    {
        "institution_ref": "first_national",
        "name": "Auto Loan",
        "loan_type": LoanType.AUTO,
        "min_amount": 5_000,
        "max_amount": 100_000,
        "min_term": 24,
        "max_term": 84,
        "base_rate": 3.8,
        "min_credit_score": 660,
        "perks": ["0.25% rate discount with autopay"],
        "requirements": ["Vehicle information"],
        "processing_time": "1 business day",
        "rates": [(12, 3.9, 660, 850), (1, 3.8, 660, 850)],
    },
    {
        "institution_ref": "community_cu",
        "name": "New & Used Auto",
        "loan_type": LoanType.AUTO,
        "min_amount": 3_000,
        "max_amount": 75_000,
        "min_term": 12,
        "max_term": 72,
        "base_rate": 3.5,
        "min_credit_score": 620,
        "perks": ["No prepayment penalty"],
        "requirements": ["Credit union membership", "Vehicle information"],
        "processing_time": "1-2 business days",
        "rates": [(12, 3.6, 580, 850), (1, 3.5, 580, 850)],
    },
    {
        "institution_ref": "community_cu",
        "name": "Student Refinance",
        "loan_type": LoanType.STUDENT,
        "min_amount": 5_000,
        "max_amount": 150_000,
        "min_term": 60,
        "max_term": 180,
        "base_rate": 5.1,
        "min_credit_score": 650,
        "perks": ["Financial education resources"],
        "requirements": ["Proof of graduation"],
        "processing_time": "3-5 business days",
        "rates": [(8, 5.1, 650, 850)],
    },
    {
        "institution_ref": "global_financial",
        "name": "Small Business Term Loan",
        "loan_type": LoanType.BUSINESS,
        "min_amount": 25_000,
        "max_amount": 2_000_000,
        "min_term": 12,
        "max_term": 120,
        "base_rate": 6.2,
        "min_credit_score": 700,
        "has_fees": True,
        "perks": ["Relationship discounts"],
        "requirements": ["Business plan", "Two years of financial statements"],
        "processing_time": "5-7 business days",
        "rates": [(20, 6.35, 700, 850), (4, 6.2, 700, 850)],
    },
]


def rate_observed_at(days_ago: int) -> datetime:
    return _days_ago(days_ago)


def compute_config_hash() -> str:
    """Compute a SHA-256 hash of the fixture data for idempotency checks."""
    content = json.dumps(
        {
            "institutions": [i["name"] for i in INSTITUTIONS],
            "products": [(p["institution_ref"], p["name"]) for p in PRODUCTS],
            "rate_count": sum(len(p["rates"]) for p in PRODUCTS),
        },
        sort_keys=True,
    )
    return hashlib.sha256(content.encode()).hexdigest()
