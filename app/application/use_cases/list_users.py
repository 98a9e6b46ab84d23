from __future__ import annotations

from datetime import datetime
from typing import Callable

from app.application.dto.admin import AdminUserOutput, ListUsersInput
from app.application.ports.admin_port import AdminPort
from app.domain.exceptions import UnauthorizedError

from .auth_common import build_plan_status, utcnow


LIST_USERS_LIMIT = 50


class ListUsersUseCase:
    def __init__(self, *, admin_port: AdminPort, clock: Callable[[], datetime] = utcnow):
        self._admin_port = admin_port
        self._clock = clock

    def execute(self, command: ListUsersInput) -> list[AdminUserOutput]:
        if not command.actor.is_admin:
            raise UnauthorizedError("Admin access required.")

        now = self._clock()
        items = self._admin_port.search_users(query=command.query.strip(), limit=LIST_USERS_LIMIT)
        return [
            AdminUserOutput(
                id=item.user.id,
                name=item.user.name,
                email=item.user.email,
                role=item.user.role,
                username=item.username,
                created_at=item.user.created_at,
                plan=build_plan_status(item.user.plan_state, now=now),
            )
            for item in items
        ]
