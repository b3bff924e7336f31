# This project was developed with assistance from AI tools.
"""Public API routes -- no authentication required."""

from fastapi import APIRouter, Depends, HTTPException, status
from lendscope_db import get_db
from lendscope_db.enums import LoanType
from sqlalchemy.ext.asyncio import AsyncSession

from ..schemas.analysis import AnalysisFailure, AnalysisRequest, AnalysisResult
from ..schemas.calculator import (
    CompareOffersRequest,
    CompareOffersResponse,
    PaymentRequest,
    PaymentResponse,
)
from ..schemas.education import EducationalContent
from ..schemas.products import InstitutionInfo, LoanProductInfo
from ..services.amortization import InvalidLoanParametersError, amortize
from ..services.analysis import analyze_loan_options
from ..services.catalog import LoanCatalog, get_product, list_institutions, list_products
from ..services.comparison import compare_offers
from ..services.education import get_educational_content
from ..services.metrics import ServiceRatingSource
from ._deps import get_loan_catalog, get_rating_source

router = APIRouter()


@router.get("/institutions", response_model=list[InstitutionInfo])
async def institutions(session: AsyncSession = Depends(get_db)) -> list[InstitutionInfo]:
    """Return active lending institutions."""
    return await list_institutions(session)


@router.get("/products", response_model=list[LoanProductInfo])
async def products(
    loan_type: LoanType | None = None,
    session: AsyncSession = Depends(get_db),
) -> list[LoanProductInfo]:
    """Return active loan products, optionally filtered by loan type."""
    return await list_products(session, loan_type)


@router.get("/products/{product_id}", response_model=LoanProductInfo)
async def product_detail(
    product_id: int,
    session: AsyncSession = Depends(get_db),
) -> LoanProductInfo:
    product = await get_product(session, product_id)
    if product is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Loan product {product_id} not found",
        )
    return product


@router.post("/calculate-payment", response_model=PaymentResponse)
async def calculate_payment(req: PaymentRequest) -> PaymentResponse:
    """Fixed-rate amortized payment for an amount, annual rate, and term."""
    try:
        breakdown = amortize(req.amount, req.annual_rate, req.term_months)
    except InvalidLoanParametersError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(exc),
        ) from exc
    return PaymentResponse(**breakdown._asdict())


@router.post("/compare-offers", response_model=CompareOffersResponse)
async def compare(req: CompareOffersRequest) -> CompareOffersResponse:
    """Price caller-supplied institution offers for one loan, cheapest payment first."""
    try:
        comparisons = compare_offers(req)
    except InvalidLoanParametersError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(exc),
        ) from exc
    return CompareOffersResponse(
        loan_type=req.loan_type,
        amount=req.amount,
        term_months=req.term_months,
        comparisons=comparisons,
    )


@router.post("/analyze", response_model=AnalysisResult | AnalysisFailure)
async def analyze(
    req: AnalysisRequest,
    catalog: LoanCatalog = Depends(get_loan_catalog),
    rating_source: ServiceRatingSource = Depends(get_rating_source),
) -> AnalysisResult | AnalysisFailure:
    """Rank eligible loan products for a borrower.

    Returns ``success: false`` with relaxed-criteria alternatives when no
    product matches the request.
    """
    return await analyze_loan_options(catalog, req, rating_source)


@router.get("/education/{loan_type}", response_model=EducationalContent)
async def education(loan_type: LoanType) -> EducationalContent:
    return get_educational_content(loan_type)
