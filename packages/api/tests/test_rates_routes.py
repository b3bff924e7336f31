# This project was developed with assistance from AI tools.
"""Tests for the rate lookup routes."""

from datetime import UTC, date, datetime
from types import SimpleNamespace

from factories import InMemoryLoanCatalog, make_mock_session, make_product, make_rate
from lendscope_db import get_db

from lendscope.routes._deps import get_loan_catalog


def test_latest_rate_defaults_to_720(app, client):
    catalog = InMemoryLoanCatalog(
        [make_product(id=1)],
        [make_rate(1, 4.6, 600, 719), make_rate(1, 4.4, 720, 850)],
    )
    app.dependency_overrides[get_loan_catalog] = lambda: catalog

    response = client.get("/api/rates/products/1/latest")

    assert response.status_code == 200
    assert response.json()["rate"] == 4.4


def test_latest_rate_for_credit_score(app, client):
    catalog = InMemoryLoanCatalog(
        [make_product(id=1)],
        [make_rate(1, 4.6, 600, 719), make_rate(1, 4.4, 720, 850)],
    )
    app.dependency_overrides[get_loan_catalog] = lambda: catalog

    response = client.get("/api/rates/products/1/latest", params={"credit_score": 650})

    assert response.json()["rate"] == 4.6


def test_latest_rate_missing_is_404(app, client):
    app.dependency_overrides[get_loan_catalog] = lambda: InMemoryLoanCatalog([])

    response = client.get("/api/rates/products/5/latest")

    assert response.status_code == 404
    assert "No rate for product 5" in response.json()["detail"]


def test_history(app, client):
    row = SimpleNamespace(
        id=1, loan_product_id=1, observed_at=datetime(2026, 3, 1, tzinfo=UTC), rate=4.5,
        term_months=360, credit_score_min=0, credit_score_max=850, conditions={},
    )

    async def fake_db():
        yield make_mock_session(items=[row])

    app.dependency_overrides[get_db] = fake_db

    response = client.get("/api/rates/products/1/history", params={"days": 7})

    assert response.status_code == 200
    assert [r["rate"] for r in response.json()] == [4.5]


def test_trends(app, client):
    async def fake_db():
        yield make_mock_session(rows=[(date(2026, 3, 1), 4.48, 4.35, 4.6, 3)])

    app.dependency_overrides[get_db] = fake_db

    response = client.get("/api/rates/trends/mortgage")

    assert response.status_code == 200
    assert response.json() == [
        {"day": "2026-03-01", "average_rate": 4.48, "min_rate": 4.35, "max_rate": 4.6, "count": 3},
    ]


def test_history_rejects_non_positive_days(client):
    response = client.get("/api/rates/products/1/history", params={"days": 0})
    assert response.status_code == 422
