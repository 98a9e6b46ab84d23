from __future__ import annotations

from typing import Any, Mapping

from app.domain.entities.analytics import AdminStats, LinkClick, ProfileView


def _as_str_or_none(value: Any) -> str | None:
    return str(value) if value is not None else None


def map_row_to_profile_view(row: Mapping[str, Any]) -> ProfileView:
    return ProfileView(
        id=str(row["id"]),
        profile_page_id=str(row["profile_page_id"]),
        user_agent=row.get("user_agent"),
        referer=row.get("referer"),
        created_at=row["created_at"],
    )


def map_row_to_link_click(row: Mapping[str, Any]) -> LinkClick:
    return LinkClick(
        id=str(row["id"]),
        link_id=_as_str_or_none(row.get("link_id")),
        profile_page_id=str(row["profile_page_id"]),
        link_title=row.get("link_title"),
        link_url=row.get("link_url"),
        user_agent=row.get("user_agent"),
        referer=row.get("referer"),
        country=row.get("country"),
        created_at=row["created_at"],
        link_deleted_at=row.get("link_deleted_at"),
    )


def map_row_to_admin_stats(row: Mapping[str, Any]) -> AdminStats:
    return AdminStats(
        total_users=int(row["total_users"] or 0),
        free_users=int(row["free_users"] or 0),
        pro_users=int(row["pro_users"] or 0),
        diamond_users=int(row["diamond_users"] or 0),
        total_links=int(row["total_links"] or 0),
        total_profile_views=int(row["total_profile_views"] or 0),
        total_link_clicks=int(row["total_link_clicks"] or 0),
        total_home_views=int(row["total_home_views"] or 0),
    )
