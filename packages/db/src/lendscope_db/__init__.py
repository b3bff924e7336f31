# This project was developed with assistance from AI tools.
__version__ = "0.1.0"

from .database import Base, SessionLocal, get_db
from .enums import InstitutionType, LoanType, UserRole
from .models import Institution, InterestRate, LoanProduct, SeedManifest

__all__ = [
    "Base",
    "SessionLocal",
    "get_db",
    "__version__",
    # Enums
    "InstitutionType",
    "LoanType",
    "UserRole",
    # Models
    "Institution",
    "InterestRate",
    "LoanProduct",
    "SeedManifest",
]
