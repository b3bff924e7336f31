# This project was developed with assistance from AI tools.
"""Tests for demo catalog seeding service and admin endpoints."""

import json
from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
from lendscope_db import Institution, InterestRate, LoanProduct, SeedManifest, get_db
from lendscope_db.enums import LoanType, UserRole

from lendscope.middleware.auth import get_current_user
from lendscope.routes._deps import get_rate_tracker
from lendscope.schemas.auth import UserContext
from lendscope.services.rate_tracker import RateSource, RateTrackerConfig, RateTrackerService
from lendscope.services.seed.fixtures import INSTITUTIONS, PRODUCTS, compute_config_hash
from lendscope.services.seed.seeder import get_seed_status, seed_demo_data

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

_ADMIN_USER = UserContext(
    user_id="admin",
    role=UserRole.ADMIN,
    email="admin@lendscope.local",
    name="Admin User",
)


def _existing_manifest():
    manifest = MagicMock()
    manifest.seeded_at = datetime(2026, 1, 1, 0, 0, 0)
    manifest.config_hash = "abc123"
    manifest.summary = json.dumps({"institutions": 4})
    return manifest


def _tracking_session(manifest=None):
    """AsyncMock session that records added objects and assigns ids on flush."""
    session = AsyncMock()
    mock_result = MagicMock()
    mock_result.scalar_one_or_none.return_value = manifest
    mock_result.scalars.return_value.all.return_value = []
    session.execute = AsyncMock(return_value=mock_result)

    added = []
    session.add = MagicMock(side_effect=added.append)
    next_id = [1]

    async def fake_flush():
        for obj in added:
            if getattr(obj, "id", None) is None:
                obj.id = next_id[0]
                next_id[0] += 1

    session.flush = fake_flush
    return session, added


def _use_admin(app, session):
    async def fake_db():
        yield session

    async def fake_user():
        return _ADMIN_USER

    app.dependency_overrides[get_db] = fake_db
    app.dependency_overrides[get_current_user] = fake_user


# ---------------------------------------------------------------------------
# Fixture data
# ---------------------------------------------------------------------------


def test_fixture_institutions():
    names = [i["name"] for i in INSTITUTIONS]
    assert names[:3] == ["First National Bank", "Community Credit Union", "Global Financial"]
    assert len({i["key"] for i in INSTITUTIONS}) == len(INSTITUTIONS)


def test_fixture_products_reference_known_institutions():
    keys = {i["key"] for i in INSTITUTIONS}
    assert all(p["institution_ref"] in keys for p in PRODUCTS)


def test_fixture_product_bounds_are_consistent():
    for p in PRODUCTS:
        assert p["max_amount"] is None or p["min_amount"] <= p["max_amount"]
        assert p["min_term"] <= p["max_term"]
        assert p["rates"], f"{p['name']} has no rate history"
        for _, rate, low, high in p["rates"]:
            assert rate > 0
            assert low <= high


def test_fixture_has_three_mortgages():
    mortgages = [p for p in PRODUCTS if p["loan_type"] == LoanType.MORTGAGE]
    assert len(mortgages) == 3


def test_fixture_config_hash_stable():
    h1 = compute_config_hash()
    h2 = compute_config_hash()
    assert h1 == h2
    assert len(h1) == 64  # SHA-256


# ---------------------------------------------------------------------------
# Seed service (mocked sessions)
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_seed_creates_catalog():
    session, added = _tracking_session()

    result = await seed_demo_data(session, force=False)

    assert result["status"] == "seeded"
    institutions = [o for o in added if isinstance(o, Institution)]
    products = [o for o in added if isinstance(o, LoanProduct)]
    rates = [o for o in added if isinstance(o, InterestRate)]
    manifests = [o for o in added if isinstance(o, SeedManifest)]

    assert len(institutions) == len(INSTITUTIONS)
    assert len(products) == len(PRODUCTS)
    assert len(rates) == sum(len(p["rates"]) for p in PRODUCTS)
    assert len(manifests) == 1
    assert result["rates"] == len(rates)

    by_id = {i.id: i for i in institutions}
    first = products[0]
    assert by_id[first.institution_id].name == "First National Bank"
    assert all(r.loan_product_id in {p.id for p in products} for r in rates)
    session.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_seed_idempotent():
    """Second call without force returns early, no duplicates."""
    session, added = _tracking_session(manifest=_existing_manifest())

    result = await seed_demo_data(session, force=False)

    assert result["status"] == "already_seeded"
    assert result["config_hash"] == "abc123"
    assert added == []
    session.commit.assert_not_awaited()


@pytest.mark.asyncio
async def test_seed_force_reseed():
    """force=True clears the old catalog then seeds again."""
    session, added = _tracking_session(manifest=_existing_manifest())

    result = await seed_demo_data(session, force=True)

    assert result["status"] == "seeded"
    # manifest lookup, institution id lookup, manifest delete
    assert session.execute.await_count >= 3
    assert any(isinstance(o, SeedManifest) for o in added)


@pytest.mark.asyncio
async def test_seed_status():
    session, _ = _tracking_session(manifest=_existing_manifest())
    status = await get_seed_status(session)
    assert status["seeded"] is True
    assert status["summary"] == {"institutions": 4}

    empty, _ = _tracking_session()
    assert await get_seed_status(empty) == {"seeded": False}


# ---------------------------------------------------------------------------
# Admin endpoints
# ---------------------------------------------------------------------------


def test_seed_endpoint_already_seeded(app, client):
    session, _ = _tracking_session(manifest=_existing_manifest())
    _use_admin(app, session)

    response = client.post("/api/admin/seed")

    assert response.status_code == 200
    assert response.json()["status"] == "already_seeded"


def test_seed_status_endpoint(app, client):
    session, _ = _tracking_session()
    _use_admin(app, session)

    response = client.get("/api/admin/seed/status")

    assert response.json() == {
        "seeded": False,
        "seeded_at": None,
        "config_hash": None,
        "summary": None,
    }


def test_admin_requires_token(client, auth_enabled):
    response = client.get("/api/admin/seed/status")
    assert response.status_code == 401
    assert response.json()["title"] == "Unauthorized"


def test_admin_rejects_user_role(app, client):
    async def fake_user():
        return UserContext(user_id="u1", role=UserRole.USER)

    app.dependency_overrides[get_current_user] = fake_user

    response = client.post("/api/admin/seed")

    assert response.status_code == 403


def test_ingest_rates_endpoint(app, client):
    session, added = _tracking_session()
    session.execute.return_value.scalars.return_value.first.return_value = MagicMock(id=9)
    _use_admin(app, session)

    response = client.post("/api/admin/rates", json={
        "source": "manual",
        "quotes": [
            {
                "product_name": "Auto Loan",
                "loan_type": "auto",
                "interest_rate": 3.75,
                "term_months": 60,
            },
        ],
    })

    assert response.status_code == 201
    assert response.json() == {"processed": 1, "skipped": 0, "errors": []}
    [observation] = added
    assert observation.loan_product_id == 9
    assert observation.credit_score_min == 0


def test_refresh_rates_endpoint_reports_source_errors(app, client):
    session, _ = _tracking_session()
    session.execute.return_value.scalars.return_value.first.return_value = None
    _use_admin(app, session)

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.host == "down.test":
            return httpx.Response(500)
        return httpx.Response(200, json=[
            {"productName": "Unlisted", "loanType": "auto", "interestRate": 3.9, "termMonths": 60},
        ])

    tracker = RateTrackerService(
        RateTrackerConfig(sources=[
            RateSource("Down", "https://down.test/rates"),
            RateSource("Up", "https://up.test/rates"),
        ]),
        client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )
    app.dependency_overrides[get_rate_tracker] = lambda: tracker

    response = client.post("/api/admin/rates/refresh")

    assert response.status_code == 200
    body = response.json()
    assert body["processed"] == 0
    assert body["skipped"] == 1
    assert [e["source"] for e in body["errors"]] == ["Down"]
