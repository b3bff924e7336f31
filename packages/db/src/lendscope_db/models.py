# This project was developed with assistance from AI tools.
"""
Lendscope -- catalog models

Lending institutions, the loan products they offer, and the dated
interest-rate observations recorded for each product.
"""

from sqlalchemy import (
    JSON,
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    Enum,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    Text,
    func,
)
from sqlalchemy.orm import relationship

from .database import Base
from .enums import LoanType


class Institution(Base):
    """Bank, credit union, or other lender whose products are compared."""

    __tablename__ = "institutions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=True)
    logo_url = Column(String(500), nullable=True)
    website = Column(String(500), nullable=True)
    contact_phone = Column(String(50), nullable=True)
    contact_email = Column(String(255), nullable=True)
    contact_address = Column(Text, nullable=True)
    # InstitutionType values; a lender can be more than one kind
    types = Column(JSON, nullable=False, default=lambda: ["other"])
    # Average customer review score, 0-5 stars
    review_score = Column(Numeric(2, 1), nullable=True)
    active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    products = relationship(
        "LoanProduct", back_populates="institution", cascade="all, delete-orphan",
    )

    def __repr__(self):
        return f"<Institution(id={self.id}, name='{self.name}')>"


class LoanProduct(Base):
    """A loan product offered by an institution."""

    __tablename__ = "loan_products"
    __table_args__ = (
        CheckConstraint(
            "max_amount IS NULL OR min_amount <= max_amount", name="ck_loan_products_amount_bounds",
        ),
        CheckConstraint(
            "max_term IS NULL OR min_term <= max_term", name="ck_loan_products_term_bounds",
        ),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    institution_id = Column(
        Integer, ForeignKey("institutions.id", ondelete="CASCADE"), nullable=False, index=True,
    )
    name = Column(String(255), nullable=False)
    loan_type = Column(
        Enum(LoanType, name="loan_type", native_enum=False),
        nullable=False,
        index=True,
    )
    description = Column(Text, nullable=True)
    min_amount = Column(Numeric(14, 2), nullable=False, default=0)
    max_amount = Column(Numeric(14, 2), nullable=True)
    # Terms are in months
    min_term = Column(Integer, nullable=False, default=1)
    max_term = Column(Integer, nullable=True)
    base_rate = Column(Numeric(6, 3), nullable=False)
    variable_rate = Column(Boolean, nullable=False, default=False)
    has_fees = Column(Boolean, nullable=False, default=False)
    min_credit_score = Column(Integer, nullable=True)
    perks = Column(JSON, nullable=False, default=list)
    requirements = Column(JSON, nullable=False, default=list)
    processing_time = Column(String(100), nullable=True)
    active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    institution = relationship("Institution", back_populates="products")
    rates = relationship(
        "InterestRate", back_populates="loan_product", cascade="all, delete-orphan",
    )

    def __repr__(self):
        return f"<LoanProduct(id={self.id}, name='{self.name}', type='{self.loan_type}')>"


class InterestRate(Base):
    """A dated rate observation for a product and credit-score band."""

    __tablename__ = "interest_rates"
    __table_args__ = (
        Index("ix_interest_rates_product_observed", "loan_product_id", "observed_at"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    loan_product_id = Column(
        Integer, ForeignKey("loan_products.id", ondelete="CASCADE"), nullable=False,
    )
    observed_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    rate = Column(Numeric(6, 3), nullable=False)
    term_months = Column(Integer, nullable=False)
    credit_score_min = Column(Integer, nullable=False, default=0)
    credit_score_max = Column(Integer, nullable=False, default=850)
    conditions = Column(JSON, nullable=False, default=dict)

    loan_product = relationship("LoanProduct", back_populates="rates")

    def __repr__(self):
        return f"<InterestRate(product_id={self.loan_product_id}, rate={self.rate})>"


class SeedManifest(Base):
    """Tracks demo catalog seeding for idempotency."""

    __tablename__ = "seed_manifest"

    id = Column(Integer, primary_key=True, autoincrement=True)
    seeded_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    config_hash = Column(String(64), nullable=False)
    summary = Column(Text, nullable=True)

    def __repr__(self):
        return f"<SeedManifest(id={self.id}, seeded_at='{self.seeded_at}')>"
