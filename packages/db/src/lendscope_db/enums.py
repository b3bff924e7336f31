# This project was developed with assistance from AI tools.
"""
Domain enums for the loan catalog.

Shared domain types used by both SQLAlchemy models (db package)
and Pydantic schemas (api package).
"""

import enum


class LoanType(str, enum.Enum):
    MORTGAGE = "mortgage"
    PERSONAL = "personal"
    AUTO = "auto"
    STUDENT = "student"
    BUSINESS = "business"
    HOME_EQUITY = "home_equity"
    CREDIT_CARD = "credit_card"
    OTHER = "other"

    @property
    def label(self) -> str:
        """Human-readable name used in narrative text ("Home Equity")."""
        return self.value.replace("_", " ").title()


class InstitutionType(str, enum.Enum):
    BANK = "bank"
    CREDIT_UNION = "credit_union"
    ONLINE_LENDER = "online_lender"
    MORTGAGE_COMPANY = "mortgage_company"
    OTHER = "other"


class UserRole(str, enum.Enum):
    USER = "user"
    ADMIN = "admin"
