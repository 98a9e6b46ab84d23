from __future__ import annotations

from urllib.parse import urlparse

from app.application.ports.profile_port import ProfilePort
from app.domain.entities.profile import Link, ProfilePage
from app.domain.entities.user import User
from app.domain.exceptions import LinkNotFoundError, ProfileNotFoundError


LINK_TITLE_MAX_LENGTH = 50


def load_owned_profile(profile_port: ProfilePort, *, user_id: str) -> tuple[ProfilePage, User]:
    profile = profile_port.get_profile_by_user_id(user_id=user_id)
    if profile is None:
        raise ProfileNotFoundError("Profile not found.")
    owner = profile_port.get_owner(profile_page_id=profile.id)
    if owner is None:
        raise ProfileNotFoundError("Profile owner not found.")
    return profile, owner


def load_owned_link(profile_port: ProfilePort, *, profile: ProfilePage, link_id: str) -> Link:
    link = profile_port.get_link(link_id=link_id)
    if link is None or link.profile_page_id != profile.id or link.deleted_at is not None:
        raise LinkNotFoundError("Link not found.")
    return link


def profile_paths(profile: ProfilePage) -> list[str]:
    return ["/dashboard", f"/{profile.username}"]


def validate_link_fields(*, title: str, url: str) -> tuple[str, str]:
    title = title.strip()
    url = url.strip()
    if not title:
        raise ValueError("title is required.")
    if len(title) > LINK_TITLE_MAX_LENGTH:
        raise ValueError(f"title must have at most {LINK_TITLE_MAX_LENGTH} characters.")
    parsed = urlparse(url)
    if parsed.scheme not in {"http", "https"} or not parsed.netloc:
        raise ValueError("url is invalid.")
    return title, url
