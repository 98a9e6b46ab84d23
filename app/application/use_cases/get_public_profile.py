from __future__ import annotations

from datetime import datetime
from typing import Callable

from app.application.dto.profile import PublicProfileOutput
from app.application.ports.profile_port import ProfilePort
from app.domain.exceptions import ProfileNotFoundError
from app.domain.services.appearance import apply_plan_fallbacks
from app.domain.services.entitlements import is_pro, plan_badge, visible_links

from .auth_common import utcnow


class GetPublicProfileUseCase:
    def __init__(self, *, profile_port: ProfilePort, clock: Callable[[], datetime] = utcnow):
        self._profile_port = profile_port
        self._clock = clock

    def execute(self, *, username: str) -> PublicProfileOutput:
        profile = self._profile_port.get_profile_by_username(username=username.strip())
        if profile is None or not profile.published:
            raise ProfileNotFoundError("Profile not found.")
        owner = self._profile_port.get_owner(profile_page_id=profile.id)
        if owner is None:
            raise ProfileNotFoundError("Profile not found.")

        now = self._clock()
        plan_state = owner.plan_state
        links = self._profile_port.list_links(profile_page_id=profile.id, enabled_only=True)

        return PublicProfileOutput(
            profile=apply_plan_fallbacks(profile, plan_state=plan_state, now=now),
            links=visible_links(plan_state, links, now=now),
            is_pro=is_pro(plan_state, now=now),
            plan_badge=plan_badge(plan_state, now=now),
        )
