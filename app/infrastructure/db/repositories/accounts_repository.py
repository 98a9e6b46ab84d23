from __future__ import annotations

from datetime import datetime

from sqlalchemy import text

from app.application.ports.admin_port import AdminPort
from app.application.ports.auth_port import AuthPort
from app.application.ports.entitlements_port import EntitlementsPort
from app.domain.entities.plan import PlanState
from app.infrastructure.db.ids import parse_uuid
from app.infrastructure.db.mappers.accounts_mapper import (
    map_row_to_user,
    map_row_to_user_credentials,
    map_row_to_user_list_item,
)
from app.infrastructure.db.mappers.analytics_mapper import map_row_to_admin_stats


USER_COLUMNS = "id, name, email, role, plan_type, pro_expires_at, created_at, updated_at"


class SqlAccountsRepository(AuthPort, EntitlementsPort, AdminPort):
    def __init__(self, engine):
        self._engine = engine

    def get_user_by_id(self, *, user_id: str):
        user_id = parse_uuid(user_id)
        if user_id is None:
            return None
        sql = f"""
            SELECT {USER_COLUMNS}
            FROM public.users
            WHERE id = :user_id
            LIMIT 1
        """
        with self._engine.connect() as conn:
            row = conn.execute(text(sql), {"user_id": user_id}).mappings().first()
        if row is None:
            return None
        return map_row_to_user(row)

    def get_user_by_email(self, *, email: str):
        sql = f"""
            SELECT {USER_COLUMNS}
            FROM public.users
            WHERE lower(email) = :email
            LIMIT 1
        """
        with self._engine.connect() as conn:
            row = conn.execute(text(sql), {"email": email.lower()}).mappings().first()
        if row is None:
            return None
        return map_row_to_user(row)

    def get_credentials_by_email(self, *, email: str):
        sql = f"""
            SELECT {USER_COLUMNS}, password_hash
            FROM public.users
            WHERE lower(email) = :email
            LIMIT 1
        """
        with self._engine.connect() as conn:
            row = conn.execute(text(sql), {"email": email.lower()}).mappings().first()
        if row is None:
            return None
        return map_row_to_user_credentials(row)

    def username_exists(self, *, username: str) -> bool:
        sql = """
            SELECT 1
            FROM public.profile_pages
            WHERE username = :username
            LIMIT 1
        """
        with self._engine.connect() as conn:
            row = conn.execute(text(sql), {"username": username}).first()
        return row is not None

    def create_user_with_profile(
        self,
        *,
        user_id: str,
        profile_id: str,
        name: str,
        email: str,
        password_hash: str,
        username: str,
        created_at: datetime,
    ):
        user_sql = f"""
            INSERT INTO public.users (
                id, name, email, password_hash, role, plan_type, pro_expires_at, created_at, updated_at
            ) VALUES (
                :id, :name, :email, :password_hash, 'USER', 'FREE', NULL, :created_at, :created_at
            )
            RETURNING {USER_COLUMNS}
        """
        profile_sql = """
            INSERT INTO public.profile_pages (
                id, user_id, username, display_name, created_at, updated_at
            ) VALUES (
                :id, :user_id, :username, :display_name, :created_at, :created_at
            )
        """
        with self._engine.begin() as conn:
            row = conn.execute(
                text(user_sql),
                {
                    "id": user_id,
                    "name": name,
                    "email": email,
                    "password_hash": password_hash,
                    "created_at": created_at,
                },
            ).mappings().one()
            conn.execute(
                text(profile_sql),
                {
                    "id": profile_id,
                    "user_id": user_id,
                    "username": username,
                    "display_name": name,
                    "created_at": created_at,
                },
            )
        return map_row_to_user(row)

    def update_plan_state(self, *, user_id: str, plan_state: PlanState, now: datetime):
        user_id = parse_uuid(user_id)
        if user_id is None:
            return None
        # plan_type e pro_expires_at mudam juntos; nunca gravar um sem o outro.
        sql = f"""
            UPDATE public.users
            SET plan_type = :plan_type,
                pro_expires_at = :pro_expires_at,
                updated_at = :now
            WHERE id = :user_id
            RETURNING {USER_COLUMNS}
        """
        with self._engine.begin() as conn:
            row = conn.execute(
                text(sql),
                {
                    "user_id": user_id,
                    "plan_type": plan_state.plan_type,
                    "pro_expires_at": plan_state.pro_expires_at,
                    "now": now,
                },
            ).mappings().first()
        if row is None:
            return None
        return map_row_to_user(row)

    def get_admin_stats(self, *, now: datetime):
        sql = """
            WITH effective AS (
                SELECT
                    CASE
                        WHEN upper(plan_type) IN ('PRO', 'DIAMOND')
                             AND (pro_expires_at IS NULL OR pro_expires_at > :now)
                            THEN upper(plan_type)
                        ELSE 'FREE'
                    END AS plan_type
                FROM public.users
            )
            SELECT
                (SELECT count(*) FROM effective) AS total_users,
                (SELECT count(*) FROM effective WHERE plan_type = 'FREE') AS free_users,
                (SELECT count(*) FROM effective WHERE plan_type = 'PRO') AS pro_users,
                (SELECT count(*) FROM effective WHERE plan_type = 'DIAMOND') AS diamond_users,
                (SELECT count(*) FROM public.links WHERE deleted_at IS NULL) AS total_links,
                (SELECT count(*) FROM public.profile_page_views) AS total_profile_views,
                (SELECT count(*) FROM public.link_clicks) AS total_link_clicks,
                (SELECT count(*) FROM public.home_page_views) AS total_home_views
        """
        with self._engine.connect() as conn:
            row = conn.execute(text(sql), {"now": now}).mappings().one()
        return map_row_to_admin_stats(row)

    def search_users(self, *, query: str, limit: int):
        sql = """
            SELECT u.id, u.name, u.email, u.role, u.plan_type, u.pro_expires_at,
                   u.created_at, u.updated_at, p.username
            FROM public.users u
            LEFT JOIN public.profile_pages p ON p.user_id = u.id
            WHERE (:query = '' OR u.email ILIKE :pattern OR u.name ILIKE :pattern)
            ORDER BY u.created_at DESC
            LIMIT :limit
        """
        params = {"query": query, "pattern": f"%{query}%", "limit": limit}
        with self._engine.connect() as conn:
            rows = conn.execute(text(sql), params).mappings().all()
        return [map_row_to_user_list_item(row) for row in rows]
