from __future__ import annotations

from datetime import datetime
from typing import Callable

from app.application.dto.profile import UpdateAppearanceInput, UpdateBackgroundInput
from app.application.ports.profile_port import ProfilePort
from app.application.ports.revalidation_port import RevalidationPort
from app.domain.entities.profile import ProfilePage
from app.domain.services.appearance import (
    BACKGROUNDS,
    BUTTON_SIZES,
    LINK_LAYOUTS,
    THEMES,
    AppearanceCatalog,
    ensure_option_allowed,
)

from .auth_common import utcnow
from .profile_common import load_owned_profile, profile_paths


class _AppearanceUseCase:
    catalog: AppearanceCatalog
    column: str

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

    def _apply(self, *, user_id: str, value: str, changes: dict) -> ProfilePage:
        profile, owner = load_owned_profile(self._profile_port, user_id=user_id)
        now = self._clock()
        ensure_option_allowed(self.catalog, value, plan_state=owner.plan_state, now=now)
        updated = self._profile_port.update_profile(profile_page_id=profile.id, changes=changes, now=now)
        self._revalidation_port.revalidate_paths(paths=profile_paths(updated))
        return updated

    def execute(self, command: UpdateAppearanceInput) -> ProfilePage:
        return self._apply(
            user_id=command.user_id,
            value=command.value,
            changes={self.column: command.value},
        )


class UpdateThemeUseCase(_AppearanceUseCase):
    catalog = THEMES
    column = "theme_id"


class UpdateLinksLayoutUseCase(_AppearanceUseCase):
    catalog = LINK_LAYOUTS
    column = "links_layout"


class UpdateButtonSizeUseCase(_AppearanceUseCase):
    catalog = BUTTON_SIZES
    column = "button_size"


class UpdateBackgroundUseCase(_AppearanceUseCase):
    catalog = BACKGROUNDS
    column = "background_type"

    def execute(self, command: UpdateBackgroundInput) -> ProfilePage:  # type: ignore[override]
        return self._apply(
            user_id=command.user_id,
            value=command.background_type,
            changes={
                "background_type": command.background_type,
                "background_enabled": command.enabled,
            },
        )
