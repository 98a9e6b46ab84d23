from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Literal


PlanType = Literal["FREE", "PRO", "DIAMOND"]

PLAN_TYPES: tuple[PlanType, ...] = ("FREE", "PRO", "DIAMOND")

PLAN_TIER_RANK: dict[str, int] = {
    "FREE": 0,
    "PRO": 1,
    "DIAMOND": 2,
}


def normalize_plan_type(value: str | None) -> PlanType:
    """Converte o valor armazenado (ex.: "pro") para o tier canonico."""
    normalized = (value or "").strip().upper()
    if normalized in PLAN_TIER_RANK:
        return normalized  # type: ignore[return-value]
    return "FREE"


@dataclass(frozen=True)
class PlanState:
    plan_type: PlanType
    pro_expires_at: datetime | None


FREE_PLAN_STATE = PlanState(plan_type="FREE", pro_expires_at=None)


@dataclass(frozen=True)
class GrantDuration:
    days: int | None = None
    months: int | None = None
    years: int | None = None
    lifetime: bool = False

    @property
    def is_empty(self) -> bool:
        return not self.lifetime and self.days is None and self.months is None and self.years is None


@dataclass(frozen=True)
class Principal:
    user_id: str
    is_admin: bool
