from __future__ import annotations

import math
from datetime import datetime, timedelta
from typing import Sequence, TypeVar

from app.domain.entities.plan import (
    FREE_PLAN_STATE,
    PLAN_TIER_RANK,
    GrantDuration,
    PlanState,
    PlanType,
    normalize_plan_type,
)
from app.domain.services.plan_duration import compute_expiration


FREE_LINK_LIMIT = 3

T = TypeVar("T")


def tier_rank(plan_type: str | None) -> int:
    return PLAN_TIER_RANK[normalize_plan_type(plan_type)]


def is_entitled(state: PlanState, required_tier: PlanType, *, now: datetime) -> bool:
    """Verifica se o usuario tem acesso ao tier exigido no instante ``now``.

    A expiracao e avaliada a cada leitura: ``plan_type`` armazenado continua
    PRO/DIAMOND depois de vencer, entao nenhum consumidor deve confiar nele
    sozinho. O instante exato de ``pro_expires_at`` ja nao da acesso.
    """
    if tier_rank(required_tier) == 0:
        return True
    if tier_rank(state.plan_type) < tier_rank(required_tier):
        return False
    return state.pro_expires_at is None or state.pro_expires_at > now


def is_pro(state: PlanState, *, now: datetime) -> bool:
    # DIAMOND libera os mesmos recursos que PRO; so o selo muda.
    return is_entitled(state, "PRO", now=now)


def effective_plan_type(state: PlanState, *, now: datetime) -> PlanType:
    plan_type = normalize_plan_type(state.plan_type)
    if plan_type != "FREE" and is_entitled(state, plan_type, now=now):
        return plan_type
    return "FREE"


def plan_badge(state: PlanState, *, now: datetime) -> PlanType | None:
    plan_type = effective_plan_type(state, now=now)
    return None if plan_type == "FREE" else plan_type


def remaining_days(state: PlanState, *, now: datetime) -> int | None:
    if normalize_plan_type(state.plan_type) == "FREE" or state.pro_expires_at is None:
        return None
    days = math.ceil((state.pro_expires_at - now) / timedelta(days=1))
    return max(days, 0)


def build_granted_plan_state(
    target_tier: PlanType,
    duration: GrantDuration,
    *,
    now: datetime,
) -> PlanState:
    """Estado resultante de uma concessao administrativa.

    Cada concessao substitui a expiracao anterior, contando a partir de ``now``.
    Remover o plano (FREE) ignora a duracao.
    """
    plan_type = normalize_plan_type(target_tier)
    if plan_type == "FREE":
        return FREE_PLAN_STATE
    return PlanState(plan_type=plan_type, pro_expires_at=compute_expiration(duration, now=now))


def link_limit_for(state: PlanState, *, now: datetime) -> int | None:
    if is_pro(state, now=now):
        return None
    return FREE_LINK_LIMIT


def can_add_link(state: PlanState, *, active_links: int, now: datetime) -> bool:
    limit = link_limit_for(state, now=now)
    return limit is None or active_links < limit


def visible_links(state: PlanState, links: Sequence[T], *, now: datetime) -> list[T]:
    """Filtra, na leitura, os links exibidos na pagina publica.

    ``links`` deve vir ordenado por ``order``. Nenhum link e apagado quando o
    plano vence; os excedentes apenas deixam de aparecer.
    """
    limit = link_limit_for(state, now=now)
    if limit is None:
        return list(links)
    return list(links[:limit])
