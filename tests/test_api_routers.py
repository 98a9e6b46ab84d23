from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from app.api import deps
from app.api.deps import (
    get_add_link_use_case,
    get_create_pix_payment_use_case,
    get_current_principal,
    get_current_user,
    get_get_public_profile_use_case,
    get_grant_plan_use_case,
    get_track_link_click_use_case,
    get_update_theme_use_case,
)
from app.application.dto.analytics import TrackLinkClickOutput
from app.application.dto.auth import AccessTokenPayload
from app.application.dto.billing import CreatePixPaymentOutput
from app.application.dto.entitlements import PlanChangeOutput, PlanStatusOutput
from app.domain.entities.plan import PlanState, Principal
from app.domain.entities.user import User
from app.domain.exceptions import (
    FeatureAccessDeniedError,
    LimitExceededError,
    ProfileNotFoundError,
    UnauthorizedError,
)
from app.main import app


NOW = datetime(2025, 1, 1, tzinfo=timezone.utc)

CURRENT_USER = User(
    id="user-1",
    name="Alice",
    email="alice@example.com",
    role="USER",
    plan_type="FREE",
    pro_expires_at=None,
    created_at=NOW,
    updated_at=NOW,
)


class RaisingUseCase:
    def __init__(self, exc: Exception):
        self.exc = exc

    def execute(self, *_args, **_kwargs):
        raise self.exc


class FakeGrantPlanUseCase:
    def __init__(self):
        self.commands = []

    def execute(self, command):
        self.commands.append(command)
        if not command.actor.is_admin:
            raise UnauthorizedError("Admin access required.")
        return PlanChangeOutput(
            user_id=command.user_id,
            plan_state=PlanState(plan_type="PRO", pro_expires_at=NOW + timedelta(days=30)),
            status=PlanStatusOutput(
                plan_type="PRO",
                effective_plan_type="PRO",
                pro_expires_at=NOW + timedelta(days=30),
                is_pro=True,
                remaining_days=30,
            ),
        )


class FakeTrackLinkClickUseCase:
    def __init__(self, redirect_url):
        self.redirect_url = redirect_url
        self.commands = []

    def execute(self, command):
        self.commands.append(command)
        return TrackLinkClickOutput(redirect_url=self.redirect_url)


class FakeCreatePixPaymentUseCase:
    def execute(self, command):
        return CreatePixPaymentOutput(
            plan_type=command.plan_type,
            months=command.months,
            original_price=Decimal("19.90"),
            amount=Decimal("19.90"),
            savings=Decimal("0.00"),
            discount_percent=0,
            transaction_id="MP0000000001",
            pix_code="000201...6304ABCD",
            qr_code_data_url="data:image/png;base64,AAAA",
        )


@pytest.fixture
def client():
    app.dependency_overrides[get_current_user] = lambda: CURRENT_USER
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_add_link_over_free_limit_returns_409(client):
    app.dependency_overrides[get_add_link_use_case] = lambda: RaisingUseCase(
        LimitExceededError("Link limit reached. Upgrade to Pro to add more links.")
    )

    response = client.post("/v1/links", json={"title": "Fourth", "url": "https://example.com"})

    assert response.status_code == 409
    assert "Upgrade to Pro" in response.json()["detail"]


def test_premium_theme_for_free_user_returns_403(client):
    app.dependency_overrides[get_update_theme_use_case] = lambda: RaisingUseCase(
        FeatureAccessDeniedError("Theme available only for Pro users.")
    )

    response = client.put("/v1/profile/theme", json={"value": "sunset"})

    assert response.status_code == 403
    assert response.json()["detail"] == "Theme available only for Pro users."


def test_admin_grant_rejects_non_admin(client):
    use_case = FakeGrantPlanUseCase()
    app.dependency_overrides[get_current_principal] = lambda: Principal(user_id="user-1", is_admin=False)
    app.dependency_overrides[get_grant_plan_use_case] = lambda: use_case

    response = client.put("/v1/admin/users/user-2/plan", json={"plan_type": "PRO", "duration": {"months": 1}})

    assert response.status_code == 403
    assert len(use_case.commands) == 1


def test_admin_grant_returns_new_plan_status(client):
    use_case = FakeGrantPlanUseCase()
    app.dependency_overrides[get_current_principal] = lambda: Principal(user_id="admin-1", is_admin=True)
    app.dependency_overrides[get_grant_plan_use_case] = lambda: use_case

    response = client.put("/v1/admin/users/user-2/plan", json={"plan_type": "PRO", "duration": {"days": 30}})

    assert response.status_code == 200
    payload = response.json()
    assert payload["user_id"] == "user-2"
    assert payload["plan"]["is_pro"] is True
    assert payload["plan"]["remaining_days"] == 30
    assert use_case.commands[0].duration.days == 30


def test_admin_grant_rejects_unknown_plan_type(client):
    app.dependency_overrides[get_current_principal] = lambda: Principal(user_id="admin-1", is_admin=True)
    app.dependency_overrides[get_grant_plan_use_case] = FakeGrantPlanUseCase

    response = client.put("/v1/admin/users/user-2/plan", json={"plan_type": "GOLD"})

    assert response.status_code == 422


def test_link_redirect_uses_link_url_and_country_header(client):
    use_case = FakeTrackLinkClickUseCase("https://blog.example.com")
    app.dependency_overrides[get_track_link_click_use_case] = lambda: use_case

    response = client.get("/r/link-1", headers={"x-vercel-ip-country": "BR"}, follow_redirects=False)

    assert response.status_code == 307
    assert response.headers["location"] == "https://blog.example.com"
    assert use_case.commands[0].country == "BR"


def test_unknown_link_redirects_home(client):
    app.dependency_overrides[get_track_link_click_use_case] = lambda: FakeTrackLinkClickUseCase(None)

    response = client.get("/r/missing", follow_redirects=False)

    assert response.status_code == 307
    assert response.headers["location"] == "/"


def test_public_profile_not_found(client):
    app.dependency_overrides[get_get_public_profile_use_case] = lambda: RaisingUseCase(
        ProfileNotFoundError("Profile not found.")
    )

    response = client.get("/v1/public/nobody")

    assert response.status_code == 404


def test_billing_price_quote(client):
    response = client.get("/v1/billing/price", params={"plan_type": "PRO", "months": 12})

    assert response.status_code == 200
    payload = response.json()
    assert Decimal(payload["final_price"]) == Decimal("191.04")
    assert payload["discount_percent"] == 20

    assert client.get("/v1/billing/price", params={"plan_type": "FREE", "months": 1}).status_code == 400


def test_billing_pix_payment(client):
    app.dependency_overrides[get_create_pix_payment_use_case] = FakeCreatePixPaymentUseCase

    response = client.post("/v1/billing/pix", json={"plan_type": "PRO", "months": 1})

    assert response.status_code == 200
    assert response.json()["transaction_id"] == "MP0000000001"
    assert client.post("/v1/billing/pix", json={"plan_type": "FREE", "months": 1}).status_code == 422


class FakeTokenService:
    def decode_access_token(self, *, token: str) -> AccessTokenPayload:
        if token != "good-token":
            raise ValueError("Invalid token.")
        return AccessTokenPayload(user_id="user-1")


class FakeAccountsRepository:
    def __init__(self, users):
        self.users = {user.id: user for user in users}

    def get_user_by_id(self, *, user_id: str):
        return self.users.get(user_id)


def test_current_user_reads_role_from_storage(monkeypatch):
    admin = replace(CURRENT_USER, role="ADMIN")
    monkeypatch.setattr(deps, "_get_token_service", lambda: FakeTokenService())
    monkeypatch.setattr(deps, "_get_accounts_repository", lambda: FakeAccountsRepository([admin]))

    assert deps.get_current_user(authorization="Bearer good-token").is_admin is True


@pytest.mark.parametrize("authorization", ["good-token", "Bearer ", "Bearer bad-token"])
def test_current_user_rejects_invalid_headers(monkeypatch, authorization):
    monkeypatch.setattr(deps, "_get_token_service", lambda: FakeTokenService())
    monkeypatch.setattr(deps, "_get_accounts_repository", lambda: FakeAccountsRepository([CURRENT_USER]))

    with pytest.raises(deps.HTTPException) as exc_info:
        deps.get_current_user(authorization=authorization)

    assert exc_info.value.status_code == 401


def test_current_user_unknown_user(monkeypatch):
    monkeypatch.setattr(deps, "_get_token_service", lambda: FakeTokenService())
    monkeypatch.setattr(deps, "_get_accounts_repository", lambda: FakeAccountsRepository([]))

    with pytest.raises(deps.HTTPException) as exc_info:
        deps.get_current_user(authorization="Bearer good-token")

    assert exc_info.value.status_code == 401
