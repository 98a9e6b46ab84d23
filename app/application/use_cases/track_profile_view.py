from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable
from uuid import uuid4

from app.application.dto.analytics import TrackHomeVisitInput, TrackProfileViewInput
from app.application.ports.analytics_port import AnalyticsPort

from .auth_common import utcnow


logger = logging.getLogger(__name__)


class TrackProfileViewUseCase:
    """Registra uma visita na pagina publica. Falhas nunca chegam ao visitante."""

    def __init__(self, *, analytics_port: AnalyticsPort, clock: Callable[[], datetime] = utcnow):
        self._analytics_port = analytics_port
        self._clock = clock

    def execute(self, command: TrackProfileViewInput) -> bool:
        try:
            self._analytics_port.record_profile_view(
                view_id=str(uuid4()),
                profile_page_id=command.profile_page_id,
                user_agent=command.user_agent,
                referer=command.referer,
                created_at=self._clock(),
            )
        except Exception:
            logger.warning(
                "track_profile_view: record_failed profile_id=%s",
                command.profile_page_id,
                exc_info=True,
            )
            return False
        return True


class TrackHomeVisitUseCase:
    def __init__(self, *, analytics_port: AnalyticsPort, clock: Callable[[], datetime] = utcnow):
        self._analytics_port = analytics_port
        self._clock = clock

    def execute(self, command: TrackHomeVisitInput) -> bool:
        try:
            self._analytics_port.record_home_view(
                view_id=str(uuid4()),
                user_agent=command.user_agent,
                referer=command.referer,
                created_at=self._clock(),
            )
        except Exception:
            logger.warning("track_home_visit: record_failed", exc_info=True)
            return False
        return True
