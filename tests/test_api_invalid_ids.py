from __future__ import annotations

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from app.api.deps import (
    get_current_principal,
    get_current_user,
    get_delete_link_use_case,
    get_grant_plan_use_case,
    get_remove_plan_use_case,
    get_toggle_link_use_case,
    get_track_link_click_use_case,
    get_update_link_use_case,
)
from app.application.use_cases.delete_link import DeleteLinkUseCase
from app.application.use_cases.grant_plan import GrantPlanUseCase
from app.application.use_cases.remove_plan import RemovePlanUseCase
from app.application.use_cases.toggle_link import ToggleLinkUseCase
from app.application.use_cases.track_link_click import TrackLinkClickUseCase
from app.application.use_cases.update_link import UpdateLinkUseCase
from app.domain.entities.plan import PlanState, Principal
from app.domain.entities.profile import ProfilePage
from app.domain.entities.user import User
from app.infrastructure.db.repositories.accounts_repository import SqlAccountsRepository
from app.infrastructure.db.repositories.analytics_repository import SqlAnalyticsRepository
from app.infrastructure.db.repositories.profile_repository import SqlProfileRepository
from app.main import app


NOW = datetime(2025, 1, 31, 10, 0, tzinfo=timezone.utc)
USER_ID = "0b6a3c4e-1f1e-4d55-9a32-6f0c2a7d8e11"

CURRENT_USER = User(
    id=USER_ID,
    name="Alice",
    email="alice@example.com",
    role="ADMIN",
    plan_type="FREE",
    pro_expires_at=None,
    created_at=NOW,
    updated_at=NOW,
)

PAGE = ProfilePage(
    id="5d1d9c9e-3b4f-4b53-8f6a-0d2f1c3b4a55",
    user_id=USER_ID,
    username="alice",
    display_name="Alice",
    bio=None,
    avatar_url=None,
    theme_id="default",
    background_type="none",
    background_enabled=False,
    button_size="regular",
    links_layout="list",
    remove_branding=False,
    display_plan_frame=True,
    published=True,
    created_at=NOW,
    updated_at=NOW,
)


class NoDatabaseProfileRepository(SqlProfileRepository):
    """Resolve o perfil do usuario em memoria; links seguem pelo repositorio SQL."""

    def __init__(self):
        super().__init__(engine=None)

    def get_profile_by_user_id(self, *, user_id: str):
        return PAGE if user_id == USER_ID else None

    def get_owner(self, *, profile_page_id: str):
        return CURRENT_USER


class InMemoryEntitlementsPort:
    def __init__(self):
        self.updates = []

    def get_user_by_id(self, *, user_id: str):
        return CURRENT_USER if user_id == USER_ID else None

    def update_plan_state(self, *, user_id: str, plan_state: PlanState, now: datetime):
        self.updates.append(plan_state)
        return None


class NullRevalidationPort:
    def revalidate_paths(self, *, paths: list[str]) -> None:
        pass


def _sql_grant_use_case() -> GrantPlanUseCase:
    return GrantPlanUseCase(
        entitlements_port=SqlAccountsRepository(engine=None),
        profile_port=NoDatabaseProfileRepository(),
        revalidation_port=NullRevalidationPort(),
    )


@pytest.fixture
def client():
    app.dependency_overrides[get_current_user] = lambda: CURRENT_USER
    app.dependency_overrides[get_current_principal] = lambda: Principal(user_id=USER_ID, is_admin=True)
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_grant_plan_for_malformed_user_id_is_not_found(client):
    app.dependency_overrides[get_grant_plan_use_case] = _sql_grant_use_case

    response = client.put("/v1/admin/users/abc/plan", json={"plan_type": "PRO", "duration": {"months": 1}})

    assert response.status_code == 404


def test_remove_plan_for_malformed_user_id_is_not_found(client):
    app.dependency_overrides[get_remove_plan_use_case] = lambda: RemovePlanUseCase(
        grant_plan_use_case=_sql_grant_use_case()
    )

    response = client.delete("/v1/admin/users/abc/plan")

    assert response.status_code == 404


@pytest.mark.parametrize(
    "duration",
    [{"years": 10000}, {"months": 10**6}, {"days": 10**7}],
)
def test_grant_plan_with_out_of_range_duration_is_rejected(client, duration):
    entitlements = InMemoryEntitlementsPort()
    app.dependency_overrides[get_grant_plan_use_case] = lambda: GrantPlanUseCase(
        entitlements_port=entitlements,
        profile_port=NoDatabaseProfileRepository(),
        revalidation_port=NullRevalidationPort(),
    )

    response = client.put(f"/v1/admin/users/{USER_ID}/plan", json={"plan_type": "PRO", "duration": duration})

    assert response.status_code == 400
    assert entitlements.updates == []


def _link_deps() -> dict:
    return {"profile_port": NoDatabaseProfileRepository(), "revalidation_port": NullRevalidationPort()}


def test_link_routes_with_malformed_id_are_not_found(client):
    app.dependency_overrides[get_update_link_use_case] = lambda: UpdateLinkUseCase(**_link_deps())
    app.dependency_overrides[get_toggle_link_use_case] = lambda: ToggleLinkUseCase(**_link_deps())
    app.dependency_overrides[get_delete_link_use_case] = lambda: DeleteLinkUseCase(**_link_deps())

    update = client.put("/v1/links/abc", json={"title": "Blog", "url": "https://blog.example.com"})
    toggle = client.post("/v1/links/abc/toggle")
    delete = client.delete("/v1/links/abc")

    assert (update.status_code, toggle.status_code, delete.status_code) == (404, 404, 404)


def test_click_on_malformed_link_id_redirects_home(client):
    app.dependency_overrides[get_track_link_click_use_case] = lambda: TrackLinkClickUseCase(
        profile_port=SqlProfileRepository(engine=None),
        analytics_port=SqlAnalyticsRepository(engine=None),
    )

    response = client.get("/r/abc", follow_redirects=False)

    assert response.status_code == 307
    assert response.headers["location"] == "/"
