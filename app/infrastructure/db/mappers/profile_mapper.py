from __future__ import annotations

from typing import Any, Mapping

from app.domain.entities.profile import Link, ProfilePage


def _as_str(value: Any) -> str:
    return str(value)


def map_row_to_profile_page(row: Mapping[str, Any]) -> ProfilePage:
    return ProfilePage(
        id=_as_str(row["id"]),
        user_id=_as_str(row["user_id"]),
        username=row["username"],
        display_name=row["display_name"],
        bio=row.get("bio"),
        avatar_url=row.get("avatar_url"),
        theme_id=row.get("theme_id") or "default",
        background_type=row.get("background_type") or "none",
        background_enabled=bool(row.get("background_enabled")),
        button_size=row.get("button_size") or "regular",
        links_layout=row.get("links_layout") or "list",
        remove_branding=bool(row.get("remove_branding")),
        display_plan_frame=bool(row.get("display_plan_frame", True)),
        published=bool(row.get("published", True)),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def map_row_to_link(row: Mapping[str, Any]) -> Link:
    return Link(
        id=_as_str(row["id"]),
        profile_page_id=_as_str(row["profile_page_id"]),
        title=row["title"],
        url=row["url"],
        icon=row.get("icon"),
        is_enabled=bool(row["is_enabled"]),
        order=int(row["order"]),
        deleted_at=row.get("deleted_at"),
        created_at=row["created_at"],
    )
