from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel


class LinkStatsResponse(BaseModel):
    title: str
    url: str
    clicks: int
    last_click_at: datetime
    deleted: bool


class DailyStatsResponse(BaseModel):
    day: date
    views: int
    clicks: int


class ProfileAnalyticsResponse(BaseModel):
    total_views: int
    total_clicks: int
    detailed: bool
    links: list[LinkStatsResponse]
    daily: list[DailyStatsResponse]


class TrackResponse(BaseModel):
    ok: bool
