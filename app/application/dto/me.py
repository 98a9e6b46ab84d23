from __future__ import annotations

from dataclasses import dataclass

from app.application.dto.entitlements import PlanStatusOutput


@dataclass(frozen=True)
class MeOutput:
    user_id: str
    name: str
    email: str
    role: str
    plan: PlanStatusOutput
