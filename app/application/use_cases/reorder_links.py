from __future__ import annotations

from app.application.dto.profile import ReorderLinksInput
from app.application.ports.profile_port import ProfilePort
from app.application.ports.revalidation_port import RevalidationPort
from app.domain.entities.profile import Link
from app.domain.exceptions import LinkNotFoundError

from .profile_common import load_owned_profile, profile_paths


class ReorderLinksUseCase:
    def __init__(self, *, profile_port: ProfilePort, revalidation_port: RevalidationPort):
        self._profile_port = profile_port
        self._revalidation_port = revalidation_port

    def execute(self, command: ReorderLinksInput) -> list[Link]:
        if len(set(command.ordered_ids)) != len(command.ordered_ids):
            raise ValueError("ordered_ids must not contain duplicates.")

        profile, _owner = load_owned_profile(self._profile_port, user_id=command.user_id)
        owned_ids = {link.id for link in self._profile_port.list_links(profile_page_id=profile.id)}
        unknown = [link_id for link_id in command.ordered_ids if link_id not in owned_ids]
        if unknown:
            raise LinkNotFoundError(f"Link not found: {unknown[0]}.")

        self._profile_port.reorder_links(profile_page_id=profile.id, ordered_ids=list(command.ordered_ids))
        self._revalidation_port.revalidate_paths(paths=profile_paths(profile))
        return self._profile_port.list_links(profile_page_id=profile.id)
