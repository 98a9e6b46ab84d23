from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from app.domain.entities.plan import PlanType
from app.domain.entities.profile import Link, ProfilePage


@dataclass(frozen=True)
class ProfileOutput:
    profile: ProfilePage
    links: list[Link]
    is_pro: bool
    plan_type: PlanType
    plan_expires_at: datetime | None
    plan_badge: PlanType | None
    link_limit: int | None


@dataclass(frozen=True)
class PublicProfileOutput:
    profile: ProfilePage
    links: list[Link]
    is_pro: bool
    plan_badge: PlanType | None


@dataclass(frozen=True)
class UpdateProfileInput:
    user_id: str
    display_name: str
    bio: str | None
    avatar_url: str | None
    button_size: str | None
    remove_branding: bool
    display_plan_frame: bool


@dataclass(frozen=True)
class UpdateAppearanceInput:
    user_id: str
    value: str


@dataclass(frozen=True)
class UpdateBackgroundInput:
    user_id: str
    background_type: str
    enabled: bool


@dataclass(frozen=True)
class AddLinkInput:
    user_id: str
    title: str
    url: str
    icon: str | None


@dataclass(frozen=True)
class UpdateLinkInput:
    user_id: str
    link_id: str
    title: str
    url: str
    icon: str | None
    is_enabled: bool


@dataclass(frozen=True)
class LinkCommandInput:
    user_id: str
    link_id: str


@dataclass(frozen=True)
class ReorderLinksInput:
    user_id: str
    ordered_ids: list[str]
