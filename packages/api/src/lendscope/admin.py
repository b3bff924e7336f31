# This project was developed with assistance from AI tools.
"""
SQLAdmin configuration for catalog administration UI

Access the admin panel at: http://localhost:8000/admin

When AUTH_DISABLED=false, requires admin credentials via login form.
When AUTH_DISABLED=true, admin panel is open (dev mode).
"""

from lendscope_db import Institution, InterestRate, LoanProduct, SeedManifest
from sqladmin import Admin, ModelView
from sqladmin.authentication import AuthenticationBackend
from sqlalchemy import create_engine
from starlette.requests import Request
from starlette.responses import Response

from .core.config import settings

# SQLAdmin requires a sync engine; derive from the async DATABASE_URL
_sync_url = settings.DATABASE_URL.replace("+asyncpg", "")
engine = create_engine(_sync_url, echo=False)


class AdminAuth(AuthenticationBackend):
    """Session-based auth gate for SQLAdmin.

    Credentials come from SQLADMIN_USER / SQLADMIN_PASSWORD.
    """

    async def login(self, request: Request) -> bool:
        form = await request.form()
        username = form.get("username")
        password = form.get("password")
        if username == settings.SQLADMIN_USER and password == settings.SQLADMIN_PASSWORD:
            request.session.update({"admin_authenticated": True})
            return True
        return False

    async def logout(self, request: Request) -> bool:
        request.session.clear()
        return True

    async def authenticate(self, request: Request) -> Response | bool:
        if settings.AUTH_DISABLED:
            return True
        return request.session.get("admin_authenticated", False)


class InstitutionAdmin(ModelView, model=Institution):
    column_list = [
        Institution.id,
        Institution.name,
        Institution.types,
        Institution.review_score,
        Institution.active,
    ]
    column_searchable_list = [Institution.name]
    column_sortable_list = [Institution.id, Institution.name, Institution.review_score]
    name = "Institution"
    name_plural = "Institutions"
    icon = "fa-solid fa-building-columns"


class LoanProductAdmin(ModelView, model=LoanProduct):
    column_list = [
        LoanProduct.id,
        LoanProduct.name,
        LoanProduct.institution,
        LoanProduct.loan_type,
        LoanProduct.min_amount,
        LoanProduct.max_amount,
        LoanProduct.min_term,
        LoanProduct.max_term,
        LoanProduct.min_credit_score,
        LoanProduct.active,
    ]
    column_searchable_list = [LoanProduct.name]
    column_sortable_list = [LoanProduct.id, LoanProduct.loan_type, LoanProduct.base_rate]
    name = "Loan Product"
    name_plural = "Loan Products"
    icon = "fa-solid fa-file-invoice-dollar"


class InterestRateAdmin(ModelView, model=InterestRate):
    column_list = [
        InterestRate.id,
        InterestRate.loan_product,
        InterestRate.observed_at,
        InterestRate.rate,
        InterestRate.term_months,
        InterestRate.credit_score_min,
        InterestRate.credit_score_max,
    ]
    column_sortable_list = [InterestRate.id, InterestRate.observed_at, InterestRate.rate]
    column_default_sort = [(InterestRate.observed_at, True)]
    can_edit = False
    name = "Interest Rate"
    name_plural = "Interest Rates"
    icon = "fa-solid fa-percent"


class SeedManifestAdmin(ModelView, model=SeedManifest):
    column_list = [SeedManifest.id, SeedManifest.seeded_at, SeedManifest.config_hash]
    can_create = False
    can_edit = False
    can_delete = False
    name = "Seed Manifest"
    name_plural = "Seed Manifests"
    icon = "fa-solid fa-database"


def setup_admin(app):
    """Set up SQLAdmin and mount it to the FastAPI app."""
    auth_backend = AdminAuth(
        secret_key=settings.SQLADMIN_SECRET_KEY,
    )
    admin = Admin(app, engine, title="Lendscope Admin", authentication_backend=auth_backend)

    admin.add_view(InstitutionAdmin)
    admin.add_view(LoanProductAdmin)
    admin.add_view(InterestRateAdmin)
    admin.add_view(SeedManifestAdmin)

    return admin
