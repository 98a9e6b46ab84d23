from __future__ import annotations

from datetime import datetime
from typing import Callable

from app.application.dto.profile import LinkCommandInput
from app.application.ports.profile_port import ProfilePort
from app.application.ports.revalidation_port import RevalidationPort

from .auth_common import utcnow
from .profile_common import load_owned_link, load_owned_profile, profile_paths


class DeleteLinkUseCase:
    """Exclusao logica: o link some da pagina mas os cliques continuam no historico."""

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

    def execute(self, command: LinkCommandInput) -> None:
        profile, _owner = load_owned_profile(self._profile_port, user_id=command.user_id)
        link = load_owned_link(self._profile_port, profile=profile, link_id=command.link_id)

        self._profile_port.soft_delete_link(link_id=link.id, deleted_at=self._clock())
        self._revalidation_port.revalidate_paths(paths=profile_paths(profile))
