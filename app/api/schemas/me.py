from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from app.application.dto.entitlements import PlanStatusOutput


class PlanStatusResponse(BaseModel):
    plan_type: str
    effective_plan_type: str
    pro_expires_at: datetime | None
    is_pro: bool
    remaining_days: int | None

    @classmethod
    def from_output(cls, output: PlanStatusOutput) -> "PlanStatusResponse":
        return cls(
            plan_type=output.plan_type,
            effective_plan_type=output.effective_plan_type,
            pro_expires_at=output.pro_expires_at,
            is_pro=output.is_pro,
            remaining_days=output.remaining_days,
        )


class MeUserResponse(BaseModel):
    id: str
    name: str
    email: str
    role: str


class MeResponse(BaseModel):
    user: MeUserResponse
    plan: PlanStatusResponse
