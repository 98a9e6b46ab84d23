from __future__ import annotations

from app.application.dto.profile import UpdateLinkInput
from app.application.ports.profile_port import ProfilePort
from app.application.ports.revalidation_port import RevalidationPort
from app.domain.entities.profile import Link

from .profile_common import load_owned_link, load_owned_profile, profile_paths, validate_link_fields


class UpdateLinkUseCase:
    def __init__(self, *, profile_port: ProfilePort, revalidation_port: RevalidationPort):
        self._profile_port = profile_port
        self._revalidation_port = revalidation_port

    def execute(self, command: UpdateLinkInput) -> Link:
        title, url = validate_link_fields(title=command.title, url=command.url)
        profile, _owner = load_owned_profile(self._profile_port, user_id=command.user_id)
        link = load_owned_link(self._profile_port, profile=profile, link_id=command.link_id)

        updated = self._profile_port.update_link(
            link_id=link.id,
            changes={
                "title": title,
                "url": url,
                "icon": (command.icon or "").strip() or None,
                "is_enabled": command.is_enabled,
            },
        )
        self._revalidation_port.revalidate_paths(paths=profile_paths(profile))
        return updated
