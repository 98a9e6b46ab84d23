from __future__ import annotations

from datetime import datetime
from typing import Callable

from app.application.dto.profile import ProfileOutput
from app.application.ports.profile_port import ProfilePort
from app.domain.services.appearance import apply_plan_fallbacks
from app.domain.services.entitlements import effective_plan_type, is_pro, link_limit_for, plan_badge

from .auth_common import utcnow
from .profile_common import load_owned_profile


class GetProfileUseCase:
    def __init__(self, *, profile_port: ProfilePort, clock: Callable[[], datetime] = utcnow):
        self._profile_port = profile_port
        self._clock = clock

    def execute(self, *, user_id: str) -> ProfileOutput:
        profile, owner = load_owned_profile(self._profile_port, user_id=user_id)
        plan_state = owner.plan_state
        now = self._clock()
        pro = is_pro(plan_state, now=now)

        return ProfileOutput(
            profile=apply_plan_fallbacks(profile, plan_state=plan_state, now=now),
            links=self._profile_port.list_links(profile_page_id=profile.id),
            is_pro=pro,
            plan_type=effective_plan_type(plan_state, now=now),
            plan_expires_at=plan_state.pro_expires_at if pro else None,
            plan_badge=plan_badge(plan_state, now=now),
            link_limit=link_limit_for(plan_state, now=now),
        )
