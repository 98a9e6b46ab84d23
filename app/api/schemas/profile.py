from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from app.domain.entities.profile import Link, ProfilePage


class ProfilePageResponse(BaseModel):
    id: str
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

    @classmethod
    def from_entity(cls, profile: ProfilePage) -> "ProfilePageResponse":
        return cls(
            id=profile.id,
            username=profile.username,
            display_name=profile.display_name,
            bio=profile.bio,
            avatar_url=profile.avatar_url,
            theme_id=profile.theme_id,
            background_type=profile.background_type,
            background_enabled=profile.background_enabled,
            button_size=profile.button_size,
            links_layout=profile.links_layout,
            remove_branding=profile.remove_branding,
            display_plan_frame=profile.display_plan_frame,
            published=profile.published,
        )


class LinkResponse(BaseModel):
    id: str
    title: str
    url: str
    icon: str | None
    is_enabled: bool
    order: int

    @classmethod
    def from_entity(cls, link: Link) -> "LinkResponse":
        return cls(
            id=link.id,
            title=link.title,
            url=link.url,
            icon=link.icon,
            is_enabled=link.is_enabled,
            order=link.order,
        )


class ProfileResponse(BaseModel):
    profile: ProfilePageResponse
    links: list[LinkResponse]
    is_pro: bool
    plan_type: str
    plan_expires_at: datetime | None
    plan_badge: str | None
    link_limit: int | None


class PublicProfileResponse(BaseModel):
    profile: ProfilePageResponse
    links: list[LinkResponse]
    is_pro: bool
    plan_badge: str | None


class UpdateProfileRequest(BaseModel):
    display_name: str = Field(..., max_length=120)
    bio: str | None = None
    avatar_url: str | None = None
    button_size: str | None = None
    remove_branding: bool = False
    display_plan_frame: bool = True


class UpdateAppearanceRequest(BaseModel):
    value: str = Field(..., min_length=1, max_length=64)


class UpdateBackgroundRequest(BaseModel):
    background_type: str = Field(..., min_length=1, max_length=64)
    enabled: bool = True


class AddLinkRequest(BaseModel):
    title: str = Field(..., max_length=200)
    url: str = Field(..., max_length=2048)
    icon: str | None = None


class UpdateLinkRequest(BaseModel):
    title: str = Field(..., max_length=200)
    url: str = Field(..., max_length=2048)
    icon: str | None = None
    is_enabled: bool = True


class ReorderLinksRequest(BaseModel):
    ordered_ids: list[str]
