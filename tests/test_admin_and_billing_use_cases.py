from __future__ import annotations

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from app.application.dto.admin import ListUsersInput
from app.application.dto.billing import CreatePixPaymentInput
from app.application.use_cases.create_pix_payment import CreatePixPaymentUseCase
from app.application.use_cases.get_admin_stats import GetAdminStatsUseCase
from app.application.use_cases.list_users import LIST_USERS_LIMIT, ListUsersUseCase
from app.domain.entities.analytics import AdminStats
from app.domain.entities.plan import Principal
from app.domain.entities.user import User, UserListItem
from app.domain.exceptions import PricingError, UnauthorizedError, UserNotFoundError
from app.domain.services.pix_code import PixConfig, crc16_ccitt


NOW = datetime(2025, 8, 20, 18, 0, tzinfo=timezone.utc)
ADMIN = Principal(user_id="admin-1", is_admin=True)
MEMBER = Principal(user_id="user-1", is_admin=False)


def _user(user_id: str, **overrides) -> User:
    data = dict(
        id=user_id,
        name=user_id.title(),
        email=f"{user_id}@example.com",
        role="USER",
        plan_type="FREE",
        pro_expires_at=None,
        created_at=NOW,
        updated_at=NOW,
    )
    data.update(overrides)
    return User(**data)


class FakeAdminPort:
    def __init__(self, items: list[UserListItem] | None = None):
        self.items = items or []
        self.searches: list[tuple[str, int]] = []
        self.stats_requested_at: list[datetime] = []

    def get_admin_stats(self, *, now: datetime) -> AdminStats:
        self.stats_requested_at.append(now)
        return AdminStats(
            total_users=4,
            free_users=2,
            pro_users=1,
            diamond_users=1,
            total_links=9,
            total_profile_views=120,
            total_link_clicks=33,
            total_home_views=500,
        )

    def search_users(self, *, query: str, limit: int) -> list[UserListItem]:
        self.searches.append((query, limit))
        return [item for item in self.items if query.lower() in item.user.email]


class FakeAuthPort:
    def __init__(self, users: list[User]):
        self.users = {user.id: user for user in users}

    def get_user_by_id(self, *, user_id: str):
        return self.users.get(user_id)


class FakeQrCodePort:
    def __init__(self):
        self.rendered: list[str] = []

    def render_data_url(self, *, content: str) -> str:
        self.rendered.append(content)
        return "data:image/png;base64,ZmFrZQ=="


PIX_CONFIG = PixConfig(key="pix@example.com", merchant_name="MYPROFILE", merchant_city="SAO PAULO")


def test_admin_stats_require_admin():
    port = FakeAdminPort()
    use_case = GetAdminStatsUseCase(admin_port=port, clock=lambda: NOW)

    with pytest.raises(UnauthorizedError):
        use_case.execute(actor=MEMBER)
    assert port.stats_requested_at == []

    stats = use_case.execute(actor=ADMIN)
    assert stats.total_users == stats.free_users + stats.pro_users + stats.diamond_users
    assert port.stats_requested_at == [NOW]


def test_list_users_reports_effective_plan():
    items = [
        UserListItem(user=_user("alice", plan_type="PRO", pro_expires_at=NOW - timedelta(days=1)), username="alice"),
        UserListItem(user=_user("bob", plan_type="DIAMOND", pro_expires_at=None), username=None),
    ]
    port = FakeAdminPort(items)

    output = ListUsersUseCase(admin_port=port, clock=lambda: NOW).execute(
        ListUsersInput(actor=ADMIN, query="  example ")
    )

    assert port.searches == [("example", LIST_USERS_LIMIT)]
    assert [(row.username, row.plan.effective_plan_type) for row in output] == [("alice", "FREE"), (None, "DIAMOND")]
    assert output[1].plan.remaining_days is None


def test_list_users_requires_admin():
    with pytest.raises(UnauthorizedError):
        ListUsersUseCase(admin_port=FakeAdminPort()).execute(ListUsersInput(actor=MEMBER, query=""))


def test_create_pix_payment_quotes_and_renders_code(monkeypatch):
    monkeypatch.setattr(
        "app.application.use_cases.create_pix_payment.generate_transaction_id",
        lambda: "MP0000000042",
    )
    qr_port = FakeQrCodePort()
    user = _user("alice")
    use_case = CreatePixPaymentUseCase(
        auth_port=FakeAuthPort([user]),
        qr_code_port=qr_port,
        pix_config=PIX_CONFIG,
    )

    output = use_case.execute(CreatePixPaymentInput(user_id="alice", plan_type="PRO", months=12))

    assert output.amount == Decimal("191.04")
    assert output.discount_percent == 20
    assert output.transaction_id == "MP0000000042"
    assert "5406191.04" in output.pix_code
    assert "0512MP0000000042" in output.pix_code
    assert output.pix_code[-4:] == crc16_ccitt(output.pix_code[:-4])
    assert qr_port.rendered == [output.pix_code]
    assert output.qr_code_data_url.startswith("data:image/png;base64,")
    # pagamento manual: o plano nao muda
    assert user.plan_type == "FREE"


def test_create_pix_payment_errors():
    use_case = CreatePixPaymentUseCase(
        auth_port=FakeAuthPort([_user("alice")]),
        qr_code_port=FakeQrCodePort(),
        pix_config=PIX_CONFIG,
    )

    with pytest.raises(UserNotFoundError):
        use_case.execute(CreatePixPaymentInput(user_id="ghost", plan_type="PRO", months=1))
    with pytest.raises(PricingError):
        use_case.execute(CreatePixPaymentInput(user_id="alice", plan_type="FREE", months=1))
