# This project was developed with assistance from AI tools.
"""Loan catalog data source.

``LoanCatalog`` is the read interface the analysis pipeline depends on.
``SqlLoanCatalog`` implements it over the async SQLAlchemy session; its WHERE
clauses restate the reference predicates in ``services.eligibility``.
"""

import logging
from typing import Protocol

from lendscope_db import Institution, InterestRate, LoanProduct
from lendscope_db.enums import LoanType
from sqlalchemy import or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ..schemas.products import InstitutionInfo, LoanProductInfo, RateObservation

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """Raised when the catalog backend fails to answer a query."""

    pass


class LoanCatalog(Protocol):
    async def find_eligible_products(
        self, loan_type: LoanType, amount: float, term_months: int, credit_score: int,
    ) -> list[LoanProductInfo]: ...

    async def latest_rate(self, product_id: int, credit_score: int) -> RateObservation | None: ...

    async def find_lower_credit_products(
        self,
        loan_type: LoanType,
        amount: float,
        term_months: int,
        credit_score: int,
        *,
        band: int,
        limit: int,
    ) -> list[LoanProductInfo]: ...

    async def find_different_term_products(
        self,
        loan_type: LoanType,
        amount: float,
        term_months: int,
        credit_score: int,
        *,
        band: int,
        limit: int,
    ) -> list[LoanProductInfo]: ...


def _amount_clause(amount: float):
    return (
        LoanProduct.min_amount <= amount,
        or_(LoanProduct.max_amount.is_(None), LoanProduct.max_amount >= amount),
    )


def _term_clause(term_months: int, band: int = 0):
    return (
        LoanProduct.min_term <= term_months + band,
        or_(LoanProduct.max_term.is_(None), LoanProduct.max_term >= term_months - band),
    )


def _credit_clause(credit_score: int, band: int = 0):
    return or_(
        LoanProduct.min_credit_score.is_(None),
        LoanProduct.min_credit_score <= credit_score + band,
    )


def _base_product_query(loan_type: LoanType):
    return (
        select(LoanProduct)
        .options(selectinload(LoanProduct.institution))
        .where(LoanProduct.loan_type == loan_type, LoanProduct.active.is_(True))
        .order_by(LoanProduct.id)
    )


class SqlLoanCatalog:
    """Catalog backed by the ``loan_products`` / ``interest_rates`` tables."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _products(self, stmt) -> list[LoanProductInfo]:
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as exc:
            raise CatalogError("Loan product query failed") from exc
        return [LoanProductInfo.model_validate(p) for p in result.scalars().all()]

    async def find_eligible_products(
        self, loan_type: LoanType, amount: float, term_months: int, credit_score: int,
    ) -> list[LoanProductInfo]:
        stmt = _base_product_query(loan_type).where(
            *_amount_clause(amount),
            *_term_clause(term_months),
            _credit_clause(credit_score),
        )
        return await self._products(stmt)

    async def latest_rate(self, product_id: int, credit_score: int) -> RateObservation | None:
        stmt = (
            select(InterestRate)
            .where(
                InterestRate.loan_product_id == product_id,
                InterestRate.credit_score_min <= credit_score,
                InterestRate.credit_score_max >= credit_score,
            )
            .order_by(InterestRate.observed_at.desc())
            .limit(1)
        )
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as exc:
            raise CatalogError(f"Rate lookup failed for product {product_id}") from exc
        rate = result.scalar_one_or_none()
        return RateObservation.model_validate(rate) if rate is not None else None

    async def find_lower_credit_products(
        self,
        loan_type: LoanType,
        amount: float,
        term_months: int,
        credit_score: int,
        *,
        band: int,
        limit: int,
    ) -> list[LoanProductInfo]:
        stmt = (
            _base_product_query(loan_type)
            .where(
                *_amount_clause(amount),
                *_term_clause(term_months),
                _credit_clause(credit_score, band),
            )
            .limit(limit)
        )
        return await self._products(stmt)

    async def find_different_term_products(
        self,
        loan_type: LoanType,
        amount: float,
        term_months: int,
        credit_score: int,
        *,
        band: int,
        limit: int,
    ) -> list[LoanProductInfo]:
        stmt = (
            _base_product_query(loan_type)
            .where(
                *_amount_clause(amount),
                *_term_clause(term_months, band),
                _credit_clause(credit_score),
            )
            .limit(limit)
        )
        return await self._products(stmt)


async def list_institutions(session: AsyncSession) -> list[InstitutionInfo]:
    """Active institutions ordered by name."""
    stmt = select(Institution).where(Institution.active.is_(True)).order_by(Institution.name)
    result = await session.execute(stmt)
    return [InstitutionInfo.model_validate(i) for i in result.scalars().all()]


async def list_products(
    session: AsyncSession,
    loan_type: LoanType | None = None,
) -> list[LoanProductInfo]:
    """Active products, optionally restricted to one loan type."""
    stmt = (
        select(LoanProduct)
        .options(selectinload(LoanProduct.institution))
        .where(LoanProduct.active.is_(True))
        .order_by(LoanProduct.id)
    )
    if loan_type is not None:
        stmt = stmt.where(LoanProduct.loan_type == loan_type)
    result = await session.execute(stmt)
    return [LoanProductInfo.model_validate(p) for p in result.scalars().all()]


async def get_product(session: AsyncSession, product_id: int) -> LoanProductInfo | None:
    """Return a single product, or None (which the route maps to 404)."""
    stmt = (
        select(LoanProduct)
        .options(selectinload(LoanProduct.institution))
        .where(LoanProduct.id == product_id)
    )
    result = await session.execute(stmt)
    product = result.scalar_one_or_none()
    return LoanProductInfo.model_validate(product) if product is not None else None
