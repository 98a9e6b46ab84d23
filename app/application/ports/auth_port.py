from __future__ import annotations

from datetime import datetime
from typing import Protocol

from app.domain.entities.user import User, UserCredentials


class AuthPort(Protocol):
    def get_user_by_id(self, *, user_id: str) -> User | None:
        ...

    def get_user_by_email(self, *, email: str) -> User | None:
        ...

    def get_credentials_by_email(self, *, email: str) -> UserCredentials | None:
        ...

    def username_exists(self, *, username: str) -> bool:
        ...

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
    ) -> User:
        ...
