# This project was developed with assistance from AI tools.
"""Static educational content, keyed by loan type."""

from lendscope_db.enums import LoanType

from ..schemas.education import EducationalContent, GlossaryTerm, VideoLink

_CONTENT: dict[LoanType, EducationalContent] = {
    LoanType.MORTGAGE: EducationalContent(
        title="Understanding Mortgage Loans",
        description="A mortgage is a loan used to purchase real estate, typically a home. "
        "The property serves as collateral for the loan, which means it can be seized by the "
        "lender if you fail to make payments.",
        key_points=[
            "Fixed-rate mortgages keep the same interest rate for the entire term",
            "Adjustable-rate mortgages (ARMs) have rates that can change over time",
            "Conventional loans require a higher credit score but often have better rates",
            "FHA loans are insured by the Federal Housing Administration and are easier "
            "to qualify for",
            "VA loans are available to eligible veterans and active military members",
        ],
        video_links=[
            VideoLink(
                title="Mortgage Basics Explained",
                url="https://example.com/videos/mortgage-basics",
            ),
            VideoLink(
                title="How to Choose the Right Mortgage",
                url="https://example.com/videos/choose-mortgage",
            ),
        ],
        common_terms=[
            GlossaryTerm(term="Principal", definition="The original loan amount"),
            GlossaryTerm(
                term="Down Payment",
                definition="The initial up-front payment for the property, typically 3-20% "
                "of the purchase price",
            ),
            GlossaryTerm(
                term="Escrow",
                definition="An account where funds are held for taxes and insurance",
            ),
            GlossaryTerm(
                term="Private Mortgage Insurance (PMI)",
                definition="Insurance required for conventional loans with less than 20% "
                "down payment",
            ),
        ],
    ),
    LoanType.PERSONAL: EducationalContent(
        title="Understanding Personal Loans",
        description="Personal loans are unsecured loans that can be used for almost any "
        "purpose, from debt consolidation to funding major purchases or expenses.",
        key_points=[
            "Unsecured loans don't require collateral but typically have higher interest rates",
            "Fixed terms and predictable monthly payments make budgeting easier",
            "No restrictions on how funds can be used in most cases",
            "Can be a good option for consolidating high-interest debt",
        ],
        video_links=[
            VideoLink(
                title="Personal Loan Basics",
                url="https://example.com/videos/personal-loan-basics",
            ),
            VideoLink(
                title="When to Use a Personal Loan",
                url="https://example.com/videos/when-to-use-personal-loan",
            ),
        ],
        common_terms=[
            GlossaryTerm(
                term="Origination Fee",
                definition="A fee charged for processing the loan, typically 1-8% of the "
                "loan amount",
            ),
            GlossaryTerm(
                term="Prepayment Penalty",
                definition="A fee charged if you pay off the loan early",
            ),
            GlossaryTerm(term="Unsecured Loan", definition="A loan that doesn't require collateral"),
            GlossaryTerm(
                term="Debt-to-Income Ratio",
                definition="Your monthly debt payments divided by your gross monthly income",
            ),
        ],
    ),
}


def get_educational_content(loan_type: LoanType) -> EducationalContent:
    """Return content for the loan type, or a generic primer."""
    content = _CONTENT.get(loan_type)
    if content is not None:
        return content
    return EducationalContent(
        title=f"Understanding {loan_type.label} Loans",
        description=f"Learn about {loan_type.label} loans and how they work.",
        key_points=["Research interest rates", "Compare loan terms", "Understand loan requirements"],
    )
