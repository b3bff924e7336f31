# This project was developed with assistance from AI tools.
"""Tests for JWT authentication dependencies."""

from datetime import UTC, datetime, timedelta

import jwt
import pytest
from factories import TEST_JWT_SECRET
from fastapi import Depends, FastAPI, HTTPException
from fastapi.testclient import TestClient
from lendscope_db.enums import UserRole

from lendscope.middleware.auth import CurrentUser, _resolve_role, require_roles
from lendscope.schemas.auth import TokenPayload


def _token(secret=TEST_JWT_SECRET, **claims):
    payload = {"sub": "user-1", "role": "user", **claims}
    return jwt.encode(payload, secret, algorithm="HS256")


def _app():
    app = FastAPI()

    @app.get("/me")
    async def me(user: CurrentUser):
        return {"user_id": user.user_id, "role": user.role.value}

    @app.get("/admin-only", dependencies=[Depends(require_roles(UserRole.ADMIN))])
    async def admin_only():
        return {"ok": True}

    return TestClient(app)


# ---------------------------------------------------------------------------
# AUTH_DISABLED bypass
# ---------------------------------------------------------------------------


def test_auth_disabled_returns_dev_admin(auth_disabled):
    resp = _app().get("/me")
    assert resp.status_code == 200
    assert resp.json() == {"user_id": "dev-user", "role": "admin"}


# ---------------------------------------------------------------------------
# Token validation
# ---------------------------------------------------------------------------


def test_missing_token_returns_401(auth_enabled):
    resp = _app().get("/me")
    assert resp.status_code == 401
    assert "Missing authentication token" in resp.json()["detail"]
    assert resp.headers["WWW-Authenticate"] == "Bearer"


def test_valid_token(auth_enabled):
    resp = _app().get("/me", headers={"Authorization": f"Bearer {_token()}"})
    assert resp.status_code == 200
    assert resp.json() == {"user_id": "user-1", "role": "user"}


def test_wrong_secret_returns_401(auth_enabled):
    token = _token(secret="someone-elses-secret")
    resp = _app().get("/me", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 401
    assert resp.json()["detail"] == "Invalid token"


def test_expired_token_returns_401(auth_enabled):
    token = _token(exp=datetime.now(UTC) - timedelta(minutes=5))
    resp = _app().get("/me", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 401
    assert resp.json()["detail"] == "Token has expired"


def test_token_without_subject_returns_401(auth_enabled):
    token = jwt.encode({"role": "admin"}, TEST_JWT_SECRET, algorithm="HS256")
    resp = _app().get("/me", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 401


def test_unknown_role_returns_403(auth_enabled):
    resp = _app().get("/me", headers={"Authorization": f"Bearer {_token(role='ceo')}"})
    assert resp.status_code == 403


# ---------------------------------------------------------------------------
# Role checks
# ---------------------------------------------------------------------------


def test_require_roles_denies_user(auth_enabled):
    resp = _app().get("/admin-only", headers={"Authorization": f"Bearer {_token()}"})
    assert resp.status_code == 403
    assert resp.json()["detail"] == "Insufficient permissions"


def test_require_roles_allows_admin(auth_enabled):
    token = _token(role="admin")
    resp = _app().get("/admin-only", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 200


def test_resolve_role():
    assert _resolve_role(TokenPayload(sub="a", role="admin")) == UserRole.ADMIN
    with pytest.raises(HTTPException) as exc_info:
        _resolve_role(TokenPayload(sub="a", role="borrower"))
    assert exc_info.value.status_code == 403
