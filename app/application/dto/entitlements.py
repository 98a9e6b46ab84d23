from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from app.domain.entities.plan import GrantDuration, PlanState, PlanType, Principal


@dataclass(frozen=True)
class PlanStatusOutput:
    plan_type: PlanType
    effective_plan_type: PlanType
    pro_expires_at: datetime | None
    is_pro: bool
    remaining_days: int | None


@dataclass(frozen=True)
class GrantPlanInput:
    actor: Principal
    user_id: str
    plan_type: PlanType
    duration: GrantDuration


@dataclass(frozen=True)
class RemovePlanInput:
    actor: Principal
    user_id: str


@dataclass(frozen=True)
class PlanChangeOutput:
    user_id: str
    plan_state: PlanState
    status: PlanStatusOutput
