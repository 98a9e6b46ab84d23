from __future__ import annotations

from datetime import datetime
from typing import Protocol

from app.domain.entities.analytics import LinkClick, ProfileView


class AnalyticsPort(Protocol):
    def record_profile_view(
        self,
        *,
        view_id: str,
        profile_page_id: str,
        user_agent: str | None,
        referer: str | None,
        created_at: datetime,
    ) -> None:
        ...

    def record_home_view(
        self,
        *,
        view_id: str,
        user_agent: str | None,
        referer: str | None,
        created_at: datetime,
    ) -> None:
        ...

    def record_link_click(
        self,
        *,
        click_id: str,
        link_id: str,
        profile_page_id: str,
        link_title: str,
        link_url: str,
        user_agent: str | None,
        referer: str | None,
        country: str | None,
        created_at: datetime,
    ) -> None:
        ...

    def list_profile_views(self, *, profile_page_id: str, since: datetime | None = None) -> list[ProfileView]:
        ...

    def list_link_clicks(self, *, profile_page_id: str, since: datetime | None = None) -> list[LinkClick]:
        ...

    def count_profile_views(self, *, profile_page_id: str) -> int:
        ...

    def count_link_clicks(self, *, profile_page_id: str) -> int:
        ...
