from __future__ import annotations

from datetime import datetime

from sqlalchemy import text

from app.application.ports.profile_port import ProfilePort
from app.infrastructure.db.ids import parse_uuid
from app.infrastructure.db.mappers.accounts_mapper import map_row_to_user
from app.infrastructure.db.mappers.profile_mapper import map_row_to_link, map_row_to_profile_page


PROFILE_COLUMNS = (
    "id, user_id, username, display_name, bio, avatar_url, theme_id, background_type, "
    "background_enabled, button_size, links_layout, remove_branding, display_plan_frame, "
    "published, created_at, updated_at"
)
LINK_COLUMNS = 'id, profile_page_id, title, url, icon, is_enabled, "order", deleted_at, created_at'

UPDATABLE_PROFILE_COLUMNS = frozenset(
    {
        "display_name",
        "bio",
        "avatar_url",
        "theme_id",
        "background_type",
        "background_enabled",
        "button_size",
        "links_layout",
        "remove_branding",
        "display_plan_frame",
        "published",
    }
)
UPDATABLE_LINK_COLUMNS = frozenset({"title", "url", "icon", "is_enabled"})


def _set_clause(changes: dict, allowed: frozenset) -> str:
    unknown = set(changes) - allowed
    if unknown:
        raise ValueError(f"Unsupported columns: {', '.join(sorted(unknown))}.")
    return ", ".join(f"{column} = :{column}" for column in sorted(changes))


class SqlProfileRepository(ProfilePort):
    def __init__(self, engine):
        self._engine = engine

    def get_profile_by_user_id(self, *, user_id: str):
        sql = f"""
            SELECT {PROFILE_COLUMNS}
            FROM public.profile_pages
            WHERE user_id = :user_id
            LIMIT 1
        """
        with self._engine.connect() as conn:
            row = conn.execute(text(sql), {"user_id": user_id}).mappings().first()
        if row is None:
            return None
        return map_row_to_profile_page(row)

    def get_profile_by_username(self, *, username: str):
        sql = f"""
            SELECT {PROFILE_COLUMNS}
            FROM public.profile_pages
            WHERE username = :username
            LIMIT 1
        """
        with self._engine.connect() as conn:
            row = conn.execute(text(sql), {"username": username}).mappings().first()
        if row is None:
            return None
        return map_row_to_profile_page(row)

    def get_owner(self, *, profile_page_id: str):
        sql = """
            SELECT u.id, u.name, u.email, u.role, u.plan_type, u.pro_expires_at, u.created_at, u.updated_at
            FROM public.users u
            JOIN public.profile_pages p ON p.user_id = u.id
            WHERE p.id = :profile_page_id
            LIMIT 1
        """
        with self._engine.connect() as conn:
            row = conn.execute(text(sql), {"profile_page_id": profile_page_id}).mappings().first()
        if row is None:
            return None
        return map_row_to_user(row)

    def update_profile(self, *, profile_page_id: str, changes: dict, now: datetime):
        set_clause = _set_clause(changes, UPDATABLE_PROFILE_COLUMNS)
        assignments = f"{set_clause}, updated_at = :now" if set_clause else "updated_at = :now"
        sql = f"""
            UPDATE public.profile_pages
            SET {assignments}
            WHERE id = :profile_page_id
            RETURNING {PROFILE_COLUMNS}
        """
        params = {**changes, "now": now, "profile_page_id": profile_page_id}
        with self._engine.begin() as conn:
            row = conn.execute(text(sql), params).mappings().one()
        return map_row_to_profile_page(row)

    def list_links(self, *, profile_page_id: str, enabled_only: bool = False):
        sql = f"""
            SELECT {LINK_COLUMNS}
            FROM public.links
            WHERE profile_page_id = :profile_page_id
              AND deleted_at IS NULL
              AND (:enabled_only = false OR is_enabled = true)
            ORDER BY "order" ASC, created_at ASC
        """
        with self._engine.connect() as conn:
            rows = conn.execute(
                text(sql),
                {"profile_page_id": profile_page_id, "enabled_only": enabled_only},
            ).mappings().all()
        return [map_row_to_link(row) for row in rows]

    def get_link(self, *, link_id: str):
        link_id = parse_uuid(link_id)
        if link_id is None:
            return None
        sql = f"""
            SELECT {LINK_COLUMNS}
            FROM public.links
            WHERE id = :link_id
            LIMIT 1
        """
        with self._engine.connect() as conn:
            row = conn.execute(text(sql), {"link_id": link_id}).mappings().first()
        if row is None:
            return None
        return map_row_to_link(row)

    def count_active_links(self, *, profile_page_id: str) -> int:
        sql = """
            SELECT count(*)
            FROM public.links
            WHERE profile_page_id = :profile_page_id
              AND deleted_at IS NULL
        """
        with self._engine.connect() as conn:
            return int(conn.execute(text(sql), {"profile_page_id": profile_page_id}).scalar_one())

    def create_link(
        self,
        *,
        link_id: str,
        profile_page_id: str,
        title: str,
        url: str,
        icon: str | None,
        created_at: datetime,
    ):
        sql = f"""
            INSERT INTO public.links (
                id, profile_page_id, title, url, icon, is_enabled, "order", created_at
            )
            SELECT
                :id, :profile_page_id, :title, :url, :icon, true,
                COALESCE(MAX("order"), -1) + 1, :created_at
            FROM public.links
            WHERE profile_page_id = :profile_page_id
              AND deleted_at IS NULL
            RETURNING {LINK_COLUMNS}
        """
        params = {
            "id": link_id,
            "profile_page_id": profile_page_id,
            "title": title,
            "url": url,
            "icon": icon,
            "created_at": created_at,
        }
        with self._engine.begin() as conn:
            row = conn.execute(text(sql), params).mappings().one()
        return map_row_to_link(row)

    def update_link(self, *, link_id: str, changes: dict):
        set_clause = _set_clause(changes, UPDATABLE_LINK_COLUMNS)
        if not set_clause:
            raise ValueError("No changes to apply.")
        sql = f"""
            UPDATE public.links
            SET {set_clause}
            WHERE id = :link_id
            RETURNING {LINK_COLUMNS}
        """
        with self._engine.begin() as conn:
            row = conn.execute(text(sql), {**changes, "link_id": link_id}).mappings().one()
        return map_row_to_link(row)

    def soft_delete_link(self, *, link_id: str, deleted_at: datetime) -> None:
        sql = """
            UPDATE public.links
            SET deleted_at = :deleted_at,
                is_enabled = false
            WHERE id = :link_id
        """
        with self._engine.begin() as conn:
            conn.execute(text(sql), {"link_id": link_id, "deleted_at": deleted_at})

    def reorder_links(self, *, profile_page_id: str, ordered_ids: list[str]) -> None:
        sql = """
            UPDATE public.links
            SET "order" = :position
            WHERE id = :link_id
              AND profile_page_id = :profile_page_id
        """
        params = [
            {"link_id": link_id, "position": position, "profile_page_id": profile_page_id}
            for position, link_id in enumerate(ordered_ids)
        ]
        if not params:
            return
        with self._engine.begin() as conn:
            conn.execute(text(sql), params)
