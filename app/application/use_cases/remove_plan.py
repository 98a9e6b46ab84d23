from __future__ import annotations

from app.application.dto.entitlements import GrantPlanInput, PlanChangeOutput, RemovePlanInput
from app.domain.entities.plan import GrantDuration

from .grant_plan import GrantPlanUseCase


class RemovePlanUseCase:
    def __init__(self, *, grant_plan_use_case: GrantPlanUseCase):
        self._grant_plan_use_case = grant_plan_use_case

    def execute(self, command: RemovePlanInput) -> PlanChangeOutput:
        return self._grant_plan_use_case.execute(
            GrantPlanInput(
                actor=command.actor,
                user_id=command.user_id,
                plan_type="FREE",
                duration=GrantDuration(),
            )
        )
