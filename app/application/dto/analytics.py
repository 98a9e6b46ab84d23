from __future__ import annotations

from dataclasses import dataclass

from app.domain.entities.analytics import DailyStats, LinkStats


@dataclass(frozen=True)
class TrackProfileViewInput:
    profile_page_id: str
    user_agent: str | None
    referer: str | None


@dataclass(frozen=True)
class TrackHomeVisitInput:
    user_agent: str | None
    referer: str | None


@dataclass(frozen=True)
class TrackLinkClickInput:
    link_id: str
    user_agent: str | None
    referer: str | None
    country: str | None


@dataclass(frozen=True)
class TrackLinkClickOutput:
    redirect_url: str | None


@dataclass(frozen=True)
class ProfileAnalyticsOutput:
    total_views: int
    total_clicks: int
    detailed: bool
    links: list[LinkStats]
    daily: list[DailyStats]
