# This project was developed with assistance from AI tools.
"""Shared fixtures.

The app from ``lendscope.main`` is a module singleton; ``_clean_overrides``
clears dependency_overrides after every test so fakes never leak between tests.
"""

import pytest
from factories import TEST_JWT_SECRET
from fastapi.testclient import TestClient

from lendscope.core.config import settings
from lendscope.main import app as real_app


@pytest.fixture(autouse=True)
def _clean_overrides():
    yield
    real_app.dependency_overrides.clear()


@pytest.fixture
def app():
    return real_app


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def auth_disabled(monkeypatch):
    monkeypatch.setattr(settings, "AUTH_DISABLED", True)


@pytest.fixture
def auth_enabled(monkeypatch):
    monkeypatch.setattr(settings, "AUTH_DISABLED", False)
    monkeypatch.setattr(settings, "JWT_SECRET", TEST_JWT_SECRET)
