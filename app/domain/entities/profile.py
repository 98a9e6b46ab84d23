from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ProfilePage:
    id: str
    user_id: str
    username: str
    display_name: str
    bio: str | None
    avatar_url: str | None
    theme_id: str
    background_type: str
    background_enabled: bool
    button_size: str
    links_layout: str
    remove_branding: bool
    display_plan_frame: bool
    published: bool
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class Link:
    id: str
    profile_page_id: str
    title: str
    url: str
    icon: str | None
    is_enabled: bool
    order: int
    deleted_at: datetime | None
    created_at: datetime
