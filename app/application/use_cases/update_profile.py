from __future__ import annotations

from datetime import datetime
from typing import Callable

from app.application.dto.profile import UpdateProfileInput
from app.application.ports.profile_port import ProfilePort
from app.application.ports.revalidation_port import RevalidationPort
from app.domain.entities.profile import ProfilePage
from app.domain.services.appearance import BUTTON_SIZES, ensure_option_allowed

from .auth_common import utcnow
from .profile_common import load_owned_profile, profile_paths


DISPLAY_NAME_MAX_LENGTH = 30
BIO_MAX_LENGTH = 160


class UpdateProfileUseCase:
    def __init__(
        self,
        *,
        profile_port: ProfilePort,
        revalidation_port: RevalidationPort,
        clock: Callable[[], datetime] = utcnow,
    ):
        self._profile_port = profile_port
        self._revalidation_port = revalidation_port
        self._clock = clock

    def execute(self, command: UpdateProfileInput) -> ProfilePage:
        display_name = command.display_name.strip()
        if not display_name:
            raise ValueError("display_name is required.")
        if len(display_name) > DISPLAY_NAME_MAX_LENGTH:
            raise ValueError(f"display_name must have at most {DISPLAY_NAME_MAX_LENGTH} characters.")
        bio = (command.bio or "").strip()
        if len(bio) > BIO_MAX_LENGTH:
            raise ValueError(f"bio must have at most {BIO_MAX_LENGTH} characters.")

        profile, owner = load_owned_profile(self._profile_port, user_id=command.user_id)
        now = self._clock()
        button_size = command.button_size or BUTTON_SIZES.default
        ensure_option_allowed(BUTTON_SIZES, button_size, plan_state=owner.plan_state, now=now)

        updated = self._profile_port.update_profile(
            profile_page_id=profile.id,
            changes={
                "display_name": display_name,
                "bio": bio or None,
                "avatar_url": (command.avatar_url or "").strip() or None,
                "button_size": button_size,
                "remove_branding": command.remove_branding,
                "display_plan_frame": command.display_plan_frame,
            },
            now=now,
        )
        self._revalidation_port.revalidate_paths(paths=profile_paths(updated))
        return updated
