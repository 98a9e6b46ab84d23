from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from app.application.dto.entitlements import PlanStatusOutput
from app.domain.entities.plan import Principal


@dataclass(frozen=True)
class ListUsersInput:
    actor: Principal
    query: str


@dataclass(frozen=True)
class AdminUserOutput:
    id: str
    name: str
    email: str
    role: str
    username: str | None
    created_at: datetime
    plan: PlanStatusOutput
