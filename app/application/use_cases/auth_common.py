from __future__ import annotations

from datetime import datetime, timezone

from app.application.dto.auth import AuthUserOutput
from app.application.dto.entitlements import PlanStatusOutput
from app.domain.entities.plan import PlanState, normalize_plan_type
from app.domain.entities.user import User
from app.domain.services.entitlements import effective_plan_type, is_pro, remaining_days


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def normalize_email(email: str) -> str:
    return email.strip().lower()


def build_auth_user_output(user: User) -> AuthUserOutput:
    return AuthUserOutput(
        id=user.id,
        name=user.name,
        email=user.email,
        role=user.role,
    )


def build_plan_status(plan_state: PlanState, *, now: datetime) -> PlanStatusOutput:
    return PlanStatusOutput(
        plan_type=normalize_plan_type(plan_state.plan_type),
        effective_plan_type=effective_plan_type(plan_state, now=now),
        pro_expires_at=plan_state.pro_expires_at,
        is_pro=is_pro(plan_state, now=now),
        remaining_days=remaining_days(plan_state, now=now),
    )
