from __future__ import annotations

from datetime import datetime
from typing import Protocol

from app.domain.entities.profile import Link, ProfilePage
from app.domain.entities.user import User


class ProfilePort(Protocol):
    def get_profile_by_user_id(self, *, user_id: str) -> ProfilePage | None:
        ...

    def get_profile_by_username(self, *, username: str) -> ProfilePage | None:
        ...

    def get_owner(self, *, profile_page_id: str) -> User | None:
        ...

    def update_profile(self, *, profile_page_id: str, changes: dict, now: datetime) -> ProfilePage:
        ...

    def list_links(self, *, profile_page_id: str, enabled_only: bool = False) -> list[Link]:
        """Links nao excluidos, ordenados por ``order``."""
        ...

    def get_link(self, *, link_id: str) -> Link | None:
        ...

    def count_active_links(self, *, profile_page_id: str) -> int:
        ...

    def create_link(
        self,
        *,
        link_id: str,
        profile_page_id: str,
        title: str,
        url: str,
        icon: str | None,
        created_at: datetime,
    ) -> Link:
        """Cria o link no fim da lista (maior ``order`` + 1)."""
        ...

    def update_link(self, *, link_id: str, changes: dict) -> Link:
        ...

    def soft_delete_link(self, *, link_id: str, deleted_at: datetime) -> None:
        ...

    def reorder_links(self, *, profile_page_id: str, ordered_ids: list[str]) -> None:
        ...
