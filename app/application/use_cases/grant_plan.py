from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable

from app.application.dto.entitlements import GrantPlanInput, PlanChangeOutput
from app.application.ports.entitlements_port import EntitlementsPort
from app.application.ports.profile_port import ProfilePort
from app.application.ports.revalidation_port import RevalidationPort
from app.domain.exceptions import UnauthorizedError, UserNotFoundError
from app.domain.services.entitlements import build_granted_plan_state

from .auth_common import build_plan_status, utcnow


logger = logging.getLogger(__name__)


class GrantPlanUseCase:
    def __init__(
        self,
        *,
        entitlements_port: EntitlementsPort,
        profile_port: ProfilePort,
        revalidation_port: RevalidationPort,
        clock: Callable[[], datetime] = utcnow,
    ):
        self._entitlements_port = entitlements_port
        self._profile_port = profile_port
        self._revalidation_port = revalidation_port
        self._clock = clock

    def execute(self, command: GrantPlanInput) -> PlanChangeOutput:
        if not command.actor.is_admin:
            raise UnauthorizedError("Only administrators can change plans.")

        user = self._entitlements_port.get_user_by_id(user_id=command.user_id)
        if user is None:
            raise UserNotFoundError("User not found.")

        now = self._clock()
        plan_state = build_granted_plan_state(command.plan_type, command.duration, now=now)

        updated = self._entitlements_port.update_plan_state(
            user_id=user.id,
            plan_state=plan_state,
            now=now,
        )
        if updated is None:
            raise UserNotFoundError("User not found.")

        logger.info(
            "grant_plan: plan_changed user_id=%s actor_id=%s plan_type=%s pro_expires_at=%s",
            updated.id,
            command.actor.user_id,
            updated.plan_type,
            updated.pro_expires_at.isoformat() if updated.pro_expires_at else None,
        )

        self._revalidation_port.revalidate_paths(paths=self._affected_paths(user_id=updated.id))

        return PlanChangeOutput(
            user_id=updated.id,
            plan_state=updated.plan_state,
            status=build_plan_status(updated.plan_state, now=now),
        )

    def _affected_paths(self, *, user_id: str) -> list[str]:
        paths = ["/admin", "/dashboard"]
        profile = self._profile_port.get_profile_by_user_id(user_id=user_id)
        if profile is not None:
            paths.append(f"/{profile.username}")
        return paths
