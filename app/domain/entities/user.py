from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Literal

from app.domain.entities.plan import PlanState, PlanType, Principal


UserRole = Literal["USER", "ADMIN"]


@dataclass(frozen=True)
class User:
    id: str
    name: str
    email: str
    role: UserRole
    plan_type: PlanType
    pro_expires_at: datetime | None
    created_at: datetime
    updated_at: datetime

    @property
    def plan_state(self) -> PlanState:
        return PlanState(plan_type=self.plan_type, pro_expires_at=self.pro_expires_at)

    @property
    def is_admin(self) -> bool:
        return self.role == "ADMIN"

    def as_principal(self) -> Principal:
        return Principal(user_id=self.id, is_admin=self.is_admin)


@dataclass(frozen=True)
class UserCredentials:
    user: User
    password_hash: str


@dataclass(frozen=True)
class UserListItem:
    user: User
    username: str | None
