from __future__ import annotations

from datetime import datetime

from sqlalchemy import text

from app.application.ports.analytics_port import AnalyticsPort
from app.infrastructure.db.mappers.analytics_mapper import map_row_to_link_click, map_row_to_profile_view


class SqlAnalyticsRepository(AnalyticsPort):
    def __init__(self, engine):
        self._engine = engine

    def record_profile_view(
        self,
        *,
        view_id: str,
        profile_page_id: str,
        user_agent: str | None,
        referer: str | None,
        created_at: datetime,
    ) -> None:
        sql = """
            INSERT INTO public.profile_page_views (id, profile_page_id, user_agent, referer, created_at)
            VALUES (:id, :profile_page_id, :user_agent, :referer, :created_at)
        """
        with self._engine.begin() as conn:
            conn.execute(
                text(sql),
                {
                    "id": view_id,
                    "profile_page_id": profile_page_id,
                    "user_agent": user_agent,
                    "referer": referer,
                    "created_at": created_at,
                },
            )

    def record_home_view(
        self,
        *,
        view_id: str,
        user_agent: str | None,
        referer: str | None,
        created_at: datetime,
    ) -> None:
        sql = """
            INSERT INTO public.home_page_views (id, user_agent, referer, created_at)
            VALUES (:id, :user_agent, :referer, :created_at)
        """
        with self._engine.begin() as conn:
            conn.execute(
                text(sql),
                {
                    "id": view_id,
                    "user_agent": user_agent,
                    "referer": referer,
                    "created_at": created_at,
                },
            )

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
        sql = """
            INSERT INTO public.link_clicks (
                id, link_id, profile_page_id, link_title, link_url, user_agent, referer, country, created_at
            ) VALUES (
                :id, :link_id, :profile_page_id, :link_title, :link_url, :user_agent, :referer, :country, :created_at
            )
        """
        with self._engine.begin() as conn:
            conn.execute(
                text(sql),
                {
                    "id": click_id,
                    "link_id": link_id,
                    "profile_page_id": profile_page_id,
                    "link_title": link_title,
                    "link_url": link_url,
                    "user_agent": user_agent,
                    "referer": referer,
                    "country": country,
                    "created_at": created_at,
                },
            )

    def list_profile_views(self, *, profile_page_id: str, since: datetime | None = None):
        sql = """
            SELECT id, profile_page_id, user_agent, referer, created_at
            FROM public.profile_page_views
            WHERE profile_page_id = :profile_page_id
              AND (CAST(:since AS timestamptz) IS NULL OR created_at >= :since)
            ORDER BY created_at ASC
        """
        with self._engine.connect() as conn:
            rows = conn.execute(
                text(sql),
                {"profile_page_id": profile_page_id, "since": since},
            ).mappings().all()
        return [map_row_to_profile_view(row) for row in rows]

    def list_link_clicks(self, *, profile_page_id: str, since: datetime | None = None):
        sql = """
            SELECT c.id, c.link_id, c.profile_page_id, c.link_title, c.link_url, c.user_agent,
                   c.referer, c.country, c.created_at, l.deleted_at AS link_deleted_at
            FROM public.link_clicks c
            LEFT JOIN public.links l ON l.id = c.link_id
            WHERE c.profile_page_id = :profile_page_id
              AND (CAST(:since AS timestamptz) IS NULL OR c.created_at >= :since)
            ORDER BY c.created_at ASC
        """
        with self._engine.connect() as conn:
            rows = conn.execute(
                text(sql),
                {"profile_page_id": profile_page_id, "since": since},
            ).mappings().all()
        return [map_row_to_link_click(row) for row in rows]

    def count_profile_views(self, *, profile_page_id: str) -> int:
        sql = "SELECT count(*) FROM public.profile_page_views WHERE profile_page_id = :profile_page_id"
        with self._engine.connect() as conn:
            return int(conn.execute(text(sql), {"profile_page_id": profile_page_id}).scalar_one())

    def count_link_clicks(self, *, profile_page_id: str) -> int:
        sql = "SELECT count(*) FROM public.link_clicks WHERE profile_page_id = :profile_page_id"
        with self._engine.connect() as conn:
            return int(conn.execute(text(sql), {"profile_page_id": profile_page_id}).scalar_one())
