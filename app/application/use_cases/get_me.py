from __future__ import annotations

from datetime import datetime
from typing import Callable

from app.application.dto.me import MeOutput
from app.domain.entities.user import User

from .auth_common import build_plan_status, utcnow


class GetMeUseCase:
    def __init__(self, *, clock: Callable[[], datetime] = utcnow):
        self._clock = clock

    def execute(self, *, user: User) -> MeOutput:
        return MeOutput(
            user_id=user.id,
            name=user.name,
            email=user.email,
            role=user.role,
            plan=build_plan_status(user.plan_state, now=self._clock()),
        )
