from __future__ import annotations

from datetime import datetime
from typing import Callable

from app.application.ports.admin_port import AdminPort
from app.domain.entities.analytics import AdminStats
from app.domain.entities.plan import Principal
from app.domain.exceptions import UnauthorizedError

from .auth_common import utcnow


class GetAdminStatsUseCase:
    def __init__(self, *, admin_port: AdminPort, clock: Callable[[], datetime] = utcnow):
        self._admin_port = admin_port
        self._clock = clock

    def execute(self, *, actor: Principal) -> AdminStats:
        if not actor.is_admin:
            raise UnauthorizedError("Admin access required.")
        return self._admin_port.get_admin_stats(now=self._clock())
