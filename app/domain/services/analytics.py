from __future__ import annotations

from datetime import date, timedelta
from typing import Iterable

from app.domain.entities.analytics import DailyStats, LinkClick, LinkStats, ProfileView


DELETED_LINK_KEY = "deleted-link"
DELETED_LINK_TITLE = "Deleted link"
DAILY_WINDOW_DAYS = 30


def build_link_stats(clicks: Iterable[LinkClick]) -> list[LinkStats]:
    grouped: dict[str, dict] = {}
    for click in sorted(clicks, key=lambda item: item.created_at):
        key = click.link_url or DELETED_LINK_KEY
        entry = grouped.get(key)
        if entry is None:
            entry = {
                "title": click.link_title or DELETED_LINK_TITLE,
                "url": click.link_url or "#",
                "clicks": 0,
                "last_click_at": click.created_at,
                "deleted": click.link_id is None,
            }
            grouped[key] = entry

        entry["clicks"] += 1
        entry["last_click_at"] = max(entry["last_click_at"], click.created_at)
        if click.link_deleted_at is not None:
            entry["deleted"] = True

    stats = [LinkStats(**entry) for entry in grouped.values()]
    return sorted(stats, key=lambda item: item.clicks, reverse=True)


def build_daily_stats(
    *,
    views: Iterable[ProfileView],
    clicks: Iterable[LinkClick],
    today: date,
    days: int = DAILY_WINDOW_DAYS,
) -> list[DailyStats]:
    window = [today - timedelta(days=offset) for offset in range(days - 1, -1, -1)]
    view_counts = {day: 0 for day in window}
    click_counts = {day: 0 for day in window}

    for view in views:
        day = view.created_at.date()
        if day in view_counts:
            view_counts[day] += 1
    for click in clicks:
        day = click.created_at.date()
        if day in click_counts:
            click_counts[day] += 1

    return [DailyStats(day=day, views=view_counts[day], clicks=click_counts[day]) for day in window]
