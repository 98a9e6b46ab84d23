from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable
from uuid import uuid4

from app.application.dto.analytics import TrackLinkClickInput, TrackLinkClickOutput
from app.application.ports.analytics_port import AnalyticsPort
from app.application.ports.profile_port import ProfilePort

from .auth_common import utcnow


logger = logging.getLogger(__name__)


class TrackLinkClickUseCase:
    def __init__(
        self,
        *,
        profile_port: ProfilePort,
        analytics_port: AnalyticsPort,
        clock: Callable[[], datetime] = utcnow,
    ):
        self._profile_port = profile_port
        self._analytics_port = analytics_port
        self._clock = clock

    def execute(self, command: TrackLinkClickInput) -> TrackLinkClickOutput:
        link = self._profile_port.get_link(link_id=command.link_id)
        if link is None or link.deleted_at is not None or not link.is_enabled:
            return TrackLinkClickOutput(redirect_url=None)

        try:
            self._analytics_port.record_link_click(
                click_id=str(uuid4()),
                link_id=link.id,
                profile_page_id=link.profile_page_id,
                link_title=link.title,
                link_url=link.url,
                user_agent=command.user_agent,
                referer=command.referer,
                country=command.country,
                created_at=self._clock(),
            )
        except Exception:
            # O redirecionamento nao depende do registro.
            logger.warning("track_link_click: record_failed link_id=%s", link.id, exc_info=True)

        return TrackLinkClickOutput(redirect_url=link.url)
