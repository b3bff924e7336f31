# This project was developed with assistance from AI tools.
"""Demo catalog seeding service.

Seeds the database with institutions, loan products, and a short rate
history per product so the public analysis endpoints return results
immediately after deployment.

Simulated for demonstration purposes -- not real financial data.
"""

import json
import logging
from datetime import UTC, datetime

from lendscope_db import Institution, InterestRate, LoanProduct, SeedManifest
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from .fixtures import INSTITUTIONS, PRODUCTS, compute_config_hash, rate_observed_at

logger = logging.getLogger(__name__)


async def _check_manifest(session: AsyncSession) -> SeedManifest | None:
    """Return the most recent seed manifest, if any."""
    result = await session.execute(
        select(SeedManifest).order_by(SeedManifest.id.desc()).limit(1)
    )
    return result.scalar_one_or_none()


async def _clear_demo_data(session: AsyncSession) -> None:
    """Delete the demo institutions by name; products and rates cascade."""
    known_names = [i["name"] for i in INSTITUTIONS]

    result = await session.execute(
        select(Institution.id).where(Institution.name.in_(known_names))
    )
    institution_ids = list(result.scalars().all())

    if institution_ids:
        product_result = await session.execute(
            select(LoanProduct.id).where(LoanProduct.institution_id.in_(institution_ids))
        )
        product_ids = list(product_result.scalars().all())
        if product_ids:
            await session.execute(
                delete(InterestRate).where(InterestRate.loan_product_id.in_(product_ids))
            )
            await session.execute(delete(LoanProduct).where(LoanProduct.id.in_(product_ids)))
        await session.execute(delete(Institution).where(Institution.id.in_(institution_ids)))

    await session.execute(delete(SeedManifest))

    logger.info("Cleared existing demo catalog")


def _build_product(product_def: dict, institution_id: int) -> LoanProduct:
    return LoanProduct(
        institution_id=institution_id,
        name=product_def["name"],
        loan_type=product_def["loan_type"],
        description=product_def.get("description"),
        min_amount=product_def["min_amount"],
        max_amount=product_def["max_amount"],
        min_term=product_def["min_term"],
        max_term=product_def["max_term"],
        base_rate=product_def["base_rate"],
        variable_rate=product_def.get("variable_rate", False),
        has_fees=product_def.get("has_fees", False),
        min_credit_score=product_def["min_credit_score"],
        perks=product_def.get("perks", []),
        requirements=product_def.get("requirements", []),
        processing_time=product_def.get("processing_time"),
    )


async def seed_demo_data(session: AsyncSession, force: bool = False) -> dict:
    """Seed the demo catalog. Returns summary dict.

    Args:
        session: Catalog DB session.
        force: If True, clear and re-seed even if already seeded.

    Returns:
        Summary dict with counts of seeded records, or ``already_seeded``
        status with the existing manifest details.
    """
    manifest = await _check_manifest(session)
    if manifest and not force:
        return {
            "status": "already_seeded",
            "seeded_at": manifest.seeded_at.isoformat(),
            "config_hash": manifest.config_hash,
        }

    if manifest and force:
        await _clear_demo_data(session)

    # 1. Institutions
    institution_map: dict[str, Institution] = {}
    for inst_def in INSTITUTIONS:
        institution = Institution(
            name=inst_def["name"],
            description=inst_def.get("description"),
            website=inst_def.get("website"),
            contact_phone=inst_def.get("contact_phone"),
            types=[t.value for t in inst_def["types"]],
            review_score=inst_def.get("review_score"),
        )
        session.add(institution)
        institution_map[inst_def["key"]] = institution

    await session.flush()  # Get institution IDs

    # 2. Products
    products = []
    for product_def in PRODUCTS:
        institution = institution_map[product_def["institution_ref"]]
        product = _build_product(product_def, institution.id)
        session.add(product)
        products.append((product, product_def))

    await session.flush()  # Get product IDs

    # 3. Rate history
    rate_count = 0
    for product, product_def in products:
        for days_ago, rate, score_min, score_max in product_def["rates"]:
            session.add(
                InterestRate(
                    loan_product_id=product.id,
                    observed_at=rate_observed_at(days_ago),
                    rate=rate,
                    term_months=product_def["max_term"],
                    credit_score_min=score_min,
                    credit_score_max=score_max,
                    conditions={"source": "demo_seed"},
                )
            )
            rate_count += 1

    # 4. Manifest
    config_hash = compute_config_hash()
    summary = {
        "institutions": len(institution_map),
        "products": len(products),
        "rates": rate_count,
    }
    session.add(SeedManifest(config_hash=config_hash, summary=json.dumps(summary)))

    await session.commit()

    logger.info("Demo catalog seeded: %s", summary)

    return {
        "status": "seeded",
        "seeded_at": datetime.now(UTC).isoformat(),
        "config_hash": config_hash,
        **summary,
    }


async def get_seed_status(session: AsyncSession) -> dict:
    """Check if the demo catalog has been seeded."""
    manifest = await _check_manifest(session)
    if manifest is None:
        return {"seeded": False}
    return {
        "seeded": True,
        "seeded_at": manifest.seeded_at.isoformat(),
        "config_hash": manifest.config_hash,
        "summary": json.loads(manifest.summary) if manifest.summary else None,
    }
