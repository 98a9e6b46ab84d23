from __future__ import annotations

from datetime import datetime
from typing import Protocol

from app.domain.entities.analytics import AdminStats
from app.domain.entities.user import UserListItem


class AdminPort(Protocol):
    def get_admin_stats(self, *, now: datetime) -> AdminStats:
        ...

    def search_users(self, *, query: str, limit: int) -> list[UserListItem]:
        ...
