from __future__ import annotations

from typing import Any, Mapping

from app.domain.entities.plan import normalize_plan_type
from app.domain.entities.user import User, UserCredentials, UserListItem


def _as_str(value: Any) -> str:
    return str(value)


def _as_role(value: Any) -> str:
    role = str(value or "USER").upper()
    return role if role in {"USER", "ADMIN"} else "USER"


def map_row_to_user(row: Mapping[str, Any]) -> User:
    return User(
        id=_as_str(row["id"]),
        name=row["name"],
        email=row["email"],
        role=_as_role(row.get("role")),
        plan_type=normalize_plan_type(row.get("plan_type")),
        pro_expires_at=row.get("pro_expires_at"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def map_row_to_user_credentials(row: Mapping[str, Any]) -> UserCredentials:
    return UserCredentials(
        user=map_row_to_user(row),
        password_hash=row.get("password_hash") or "",
    )


def map_row_to_user_list_item(row: Mapping[str, Any]) -> UserListItem:
    return UserListItem(
        user=map_row_to_user(row),
        username=row.get("username"),
    )
