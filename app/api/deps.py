from __future__ import annotations

from functools import lru_cache

from fastapi import Depends, Header, HTTPException

from app.application.use_cases.add_link import AddLinkUseCase
from app.application.use_cases.create_pix_payment import CreatePixPaymentUseCase
from app.application.use_cases.delete_link import DeleteLinkUseCase
from app.application.use_cases.get_admin_stats import GetAdminStatsUseCase
from app.application.use_cases.get_me import GetMeUseCase
from app.application.use_cases.get_profile import GetProfileUseCase
from app.application.use_cases.get_profile_analytics import GetProfileAnalyticsUseCase
from app.application.use_cases.get_public_profile import GetPublicProfileUseCase
from app.application.use_cases.grant_plan import GrantPlanUseCase
from app.application.use_cases.list_users import ListUsersUseCase
from app.application.use_cases.login_local import LoginLocalUseCase
from app.application.use_cases.register_user import RegisterUserUseCase
from app.application.use_cases.remove_plan import RemovePlanUseCase
from app.application.use_cases.reorder_links import ReorderLinksUseCase
from app.application.use_cases.toggle_link import ToggleLinkUseCase
from app.application.use_cases.track_link_click import TrackLinkClickUseCase
from app.application.use_cases.track_profile_view import TrackHomeVisitUseCase, TrackProfileViewUseCase
from app.application.use_cases.update_appearance import (
    UpdateBackgroundUseCase,
    UpdateButtonSizeUseCase,
    UpdateLinksLayoutUseCase,
    UpdateThemeUseCase,
)
from app.application.use_cases.update_link import UpdateLinkUseCase
from app.application.use_cases.update_profile import UpdateProfileUseCase
from app.domain.entities.plan import Principal
from app.domain.entities.user import User
from app.domain.services.pix_code import PixConfig
from app.infrastructure.clients.qr_code_renderer import QrCodeRenderer
from app.infrastructure.clients.revalidation_client import (
    HttpRevalidationClient,
    RevalidationClientSettings,
)
from app.infrastructure.db.engine import get_engine
from app.infrastructure.db.repositories.accounts_repository import SqlAccountsRepository
from app.infrastructure.db.repositories.analytics_repository import SqlAnalyticsRepository
from app.infrastructure.db.repositories.profile_repository import SqlProfileRepository
from app.infrastructure.security.password_hasher import PasswordHasher
from app.infrastructure.security.token_service import JwtTokenService
from app.shared.config import get_settings


def _get_db_engine():
    settings = get_settings()
    if not settings.postgres_dsn:
        raise HTTPException(status_code=500, detail="POSTGRES_DSN is required.")
    return get_engine(settings.postgres_dsn)


def _get_accounts_repository() -> SqlAccountsRepository:
    return SqlAccountsRepository(_get_db_engine())


def _get_profile_repository() -> SqlProfileRepository:
    return SqlProfileRepository(_get_db_engine())


def _get_analytics_repository() -> SqlAnalyticsRepository:
    return SqlAnalyticsRepository(_get_db_engine())


@lru_cache(maxsize=1)
def _get_password_hasher() -> PasswordHasher:
    return PasswordHasher()


@lru_cache(maxsize=1)
def _get_token_service() -> JwtTokenService:
    settings = get_settings()
    if not settings.jwt_secret:
        raise HTTPException(status_code=500, detail="JWT_SECRET is required.")
    return JwtTokenService(
        jwt_secret=settings.jwt_secret,
        access_ttl_minutes=settings.jwt_access_ttl_minutes,
    )


@lru_cache(maxsize=1)
def _get_revalidation_client() -> HttpRevalidationClient:
    settings = get_settings()
    return HttpRevalidationClient(
        RevalidationClientSettings(
            revalidate_url=settings.revalidate_url,
            revalidate_secret=settings.revalidate_secret,
            timeout_seconds=settings.revalidate_timeout_seconds,
        )
    )


@lru_cache(maxsize=1)
def _get_qr_code_renderer() -> QrCodeRenderer:
    return QrCodeRenderer()


def _get_pix_config() -> PixConfig:
    settings = get_settings()
    if not settings.pix_key:
        raise HTTPException(status_code=500, detail="PIX_KEY is required.")
    return PixConfig(
        key=settings.pix_key,
        merchant_name=settings.pix_merchant_name,
        merchant_city=settings.pix_merchant_city,
    )


def get_register_user_use_case() -> RegisterUserUseCase:
    return RegisterUserUseCase(
        auth_port=_get_accounts_repository(),
        password_hasher=_get_password_hasher(),
    )


def get_login_local_use_case() -> LoginLocalUseCase:
    return LoginLocalUseCase(
        auth_port=_get_accounts_repository(),
        password_hasher=_get_password_hasher(),
        token_port=_get_token_service(),
    )


def get_get_me_use_case() -> GetMeUseCase:
    return GetMeUseCase()


def get_grant_plan_use_case() -> GrantPlanUseCase:
    return GrantPlanUseCase(
        entitlements_port=_get_accounts_repository(),
        profile_port=_get_profile_repository(),
        revalidation_port=_get_revalidation_client(),
    )


def get_remove_plan_use_case() -> RemovePlanUseCase:
    return RemovePlanUseCase(grant_plan_use_case=get_grant_plan_use_case())


def get_get_admin_stats_use_case() -> GetAdminStatsUseCase:
    return GetAdminStatsUseCase(admin_port=_get_accounts_repository())


def get_list_users_use_case() -> ListUsersUseCase:
    return ListUsersUseCase(admin_port=_get_accounts_repository())


def get_get_profile_use_case() -> GetProfileUseCase:
    return GetProfileUseCase(profile_port=_get_profile_repository())


def get_update_profile_use_case() -> UpdateProfileUseCase:
    return UpdateProfileUseCase(
        profile_port=_get_profile_repository(),
        revalidation_port=_get_revalidation_client(),
    )


def get_update_theme_use_case() -> UpdateThemeUseCase:
    return UpdateThemeUseCase(
        profile_port=_get_profile_repository(),
        revalidation_port=_get_revalidation_client(),
    )


def get_update_background_use_case() -> UpdateBackgroundUseCase:
    return UpdateBackgroundUseCase(
        profile_port=_get_profile_repository(),
        revalidation_port=_get_revalidation_client(),
    )


def get_update_links_layout_use_case() -> UpdateLinksLayoutUseCase:
    return UpdateLinksLayoutUseCase(
        profile_port=_get_profile_repository(),
        revalidation_port=_get_revalidation_client(),
    )


def get_update_button_size_use_case() -> UpdateButtonSizeUseCase:
    return UpdateButtonSizeUseCase(
        profile_port=_get_profile_repository(),
        revalidation_port=_get_revalidation_client(),
    )


def get_add_link_use_case() -> AddLinkUseCase:
    return AddLinkUseCase(
        profile_port=_get_profile_repository(),
        revalidation_port=_get_revalidation_client(),
    )


def get_update_link_use_case() -> UpdateLinkUseCase:
    return UpdateLinkUseCase(
        profile_port=_get_profile_repository(),
        revalidation_port=_get_revalidation_client(),
    )


def get_toggle_link_use_case() -> ToggleLinkUseCase:
    return ToggleLinkUseCase(
        profile_port=_get_profile_repository(),
        revalidation_port=_get_revalidation_client(),
    )


def get_delete_link_use_case() -> DeleteLinkUseCase:
    return DeleteLinkUseCase(
        profile_port=_get_profile_repository(),
        revalidation_port=_get_revalidation_client(),
    )


def get_reorder_links_use_case() -> ReorderLinksUseCase:
    return ReorderLinksUseCase(
        profile_port=_get_profile_repository(),
        revalidation_port=_get_revalidation_client(),
    )


def get_get_public_profile_use_case() -> GetPublicProfileUseCase:
    return GetPublicProfileUseCase(profile_port=_get_profile_repository())


def get_track_profile_view_use_case() -> TrackProfileViewUseCase:
    return TrackProfileViewUseCase(analytics_port=_get_analytics_repository())


def get_track_home_visit_use_case() -> TrackHomeVisitUseCase:
    return TrackHomeVisitUseCase(analytics_port=_get_analytics_repository())


def get_track_link_click_use_case() -> TrackLinkClickUseCase:
    return TrackLinkClickUseCase(
        profile_port=_get_profile_repository(),
        analytics_port=_get_analytics_repository(),
    )


def get_get_profile_analytics_use_case() -> GetProfileAnalyticsUseCase:
    return GetProfileAnalyticsUseCase(
        profile_port=_get_profile_repository(),
        analytics_port=_get_analytics_repository(),
    )


def get_create_pix_payment_use_case() -> CreatePixPaymentUseCase:
    return CreatePixPaymentUseCase(
        auth_port=_get_accounts_repository(),
        qr_code_port=_get_qr_code_renderer(),
        pix_config=_get_pix_config(),
    )


def get_current_user(
    authorization: str = Header(...),
) -> User:
    if not authorization.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Invalid authorization header.")
    token = authorization.replace("Bearer ", "", 1).strip()
    if not token:
        raise HTTPException(status_code=401, detail="Missing access token.")

    token_service = _get_token_service()
    auth_port = _get_accounts_repository()

    try:
        payload = token_service.decode_access_token(token=token)
    except ValueError as exc:
        raise HTTPException(status_code=401, detail=str(exc)) from exc

    user = auth_port.get_user_by_id(user_id=payload.user_id)
    if user is None:
        raise HTTPException(status_code=401, detail="User not found.")
    return user


def get_current_principal(user: User = Depends(get_current_user)) -> Principal:
    return user.as_principal()
