from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable
from uuid import uuid4

from app.application.dto.profile import AddLinkInput
from app.application.ports.profile_port import ProfilePort
from app.application.ports.revalidation_port import RevalidationPort
from app.domain.entities.profile import Link
from app.domain.exceptions import LimitExceededError
from app.domain.services.entitlements import can_add_link

from .auth_common import utcnow
from .profile_common import load_owned_profile, profile_paths, validate_link_fields


logger = logging.getLogger(__name__)


class AddLinkUseCase:
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

    def execute(self, command: AddLinkInput) -> Link:
        profile, owner = load_owned_profile(self._profile_port, user_id=command.user_id)
        now = self._clock()

        active_links = self._profile_port.count_active_links(profile_page_id=profile.id)
        if not can_add_link(owner.plan_state, active_links=active_links, now=now):
            logger.info(
                "add_link: limit_exceeded user_id=%s profile_id=%s active_links=%s",
                owner.id,
                profile.id,
                active_links,
            )
            raise LimitExceededError("Link limit reached. Upgrade to Pro to add more links.")

        title, url = validate_link_fields(title=command.title, url=command.url)
        link = self._profile_port.create_link(
            link_id=str(uuid4()),
            profile_page_id=profile.id,
            title=title,
            url=url,
            icon=(command.icon or "").strip() or None,
            created_at=now,
        )
        self._revalidation_port.revalidate_paths(paths=profile_paths(profile))
        return link
