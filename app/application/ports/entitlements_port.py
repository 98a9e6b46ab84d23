from __future__ import annotations

from datetime import datetime
from typing import Protocol

from app.domain.entities.plan import PlanState
from app.domain.entities.user import User


class EntitlementsPort(Protocol):
    def get_user_by_id(self, *, user_id: str) -> User | None:
        ...

    def update_plan_state(self, *, user_id: str, plan_state: PlanState, now: datetime) -> User | None:
        """Grava ``plan_type`` e ``pro_expires_at`` num unico UPDATE atomico."""
        ...
