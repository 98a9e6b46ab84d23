from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime


@dataclass(frozen=True)
class ProfileView:
    id: str
    profile_page_id: str
    user_agent: str | None
    referer: str | None
    created_at: datetime


@dataclass(frozen=True)
class LinkClick:
    id: str
    link_id: str | None
    profile_page_id: str
    link_title: str | None
    link_url: str | None
    user_agent: str | None
    referer: str | None
    country: str | None
    created_at: datetime
    link_deleted_at: datetime | None = None


@dataclass(frozen=True)
class LinkStats:
    title: str
    url: str
    clicks: int
    last_click_at: datetime
    deleted: bool


@dataclass(frozen=True)
class DailyStats:
    day: date
    views: int
    clicks: int


@dataclass(frozen=True)
class AdminStats:
    total_users: int
    free_users: int
    pro_users: int
    diamond_users: int
    total_links: int
    total_profile_views: int
    total_link_clicks: int
    total_home_views: int
