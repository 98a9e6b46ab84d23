from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from app.api.deps import (
    get_current_user,
    get_get_profile_use_case,
    get_update_background_use_case,
    get_update_button_size_use_case,
    get_update_links_layout_use_case,
    get_update_profile_use_case,
    get_update_theme_use_case,
)
from app.api.schemas.profile import (
    LinkResponse,
    ProfilePageResponse,
    ProfileResponse,
    UpdateAppearanceRequest,
    UpdateBackgroundRequest,
    UpdateProfileRequest,
)
from app.application.dto.profile import UpdateAppearanceInput, UpdateBackgroundInput, UpdateProfileInput
from app.application.use_cases.get_profile import GetProfileUseCase
from app.application.use_cases.update_appearance import (
    UpdateBackgroundUseCase,
    UpdateButtonSizeUseCase,
    UpdateLinksLayoutUseCase,
    UpdateThemeUseCase,
)
from app.application.use_cases.update_profile import UpdateProfileUseCase
from app.domain.entities.user import User
from app.domain.exceptions import (
    FeatureAccessDeniedError,
    InvalidAppearanceOptionError,
    ProfileNotFoundError,
)


router = APIRouter()


@router.get("/v1/profile", response_model=ProfileResponse)
def get_profile(
    current_user: User = Depends(get_current_user),
    use_case: GetProfileUseCase = Depends(get_get_profile_use_case),
):
    try:
        output = use_case.execute(user_id=current_user.id)
    except ProfileNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc

    return ProfileResponse(
        profile=ProfilePageResponse.from_entity(output.profile),
        links=[LinkResponse.from_entity(link) for link in output.links],
        is_pro=output.is_pro,
        plan_type=output.plan_type,
        plan_expires_at=output.plan_expires_at,
        plan_badge=output.plan_badge,
        link_limit=output.link_limit,
    )


@router.put("/v1/profile", response_model=ProfilePageResponse)
def update_profile(
    req: UpdateProfileRequest,
    current_user: User = Depends(get_current_user),
    use_case: UpdateProfileUseCase = Depends(get_update_profile_use_case),
):
    try:
        profile = use_case.execute(
            UpdateProfileInput(
                user_id=current_user.id,
                display_name=req.display_name,
                bio=req.bio,
                avatar_url=req.avatar_url,
                button_size=req.button_size,
                remove_branding=req.remove_branding,
                display_plan_frame=req.display_plan_frame,
            )
        )
    except ProfileNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except InvalidAppearanceOptionError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return ProfilePageResponse.from_entity(profile)


def _update_appearance(use_case, command) -> ProfilePageResponse:
    try:
        profile = use_case.execute(command)
    except ProfileNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except InvalidAppearanceOptionError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except FeatureAccessDeniedError as exc:
        raise HTTPException(status_code=403, detail=str(exc)) from exc
    return ProfilePageResponse.from_entity(profile)


@router.put("/v1/profile/theme", response_model=ProfilePageResponse)
def update_theme(
    req: UpdateAppearanceRequest,
    current_user: User = Depends(get_current_user),
    use_case: UpdateThemeUseCase = Depends(get_update_theme_use_case),
):
    return _update_appearance(use_case, UpdateAppearanceInput(user_id=current_user.id, value=req.value))


@router.put("/v1/profile/background", response_model=ProfilePageResponse)
def update_background(
    req: UpdateBackgroundRequest,
    current_user: User = Depends(get_current_user),
    use_case: UpdateBackgroundUseCase = Depends(get_update_background_use_case),
):
    return _update_appearance(
        use_case,
        UpdateBackgroundInput(
            user_id=current_user.id,
            background_type=req.background_type,
            enabled=req.enabled,
        ),
    )


@router.put("/v1/profile/layout", response_model=ProfilePageResponse)
def update_links_layout(
    req: UpdateAppearanceRequest,
    current_user: User = Depends(get_current_user),
    use_case: UpdateLinksLayoutUseCase = Depends(get_update_links_layout_use_case),
):
    return _update_appearance(use_case, UpdateAppearanceInput(user_id=current_user.id, value=req.value))


@router.put("/v1/profile/button-size", response_model=ProfilePageResponse)
def update_button_size(
    req: UpdateAppearanceRequest,
    current_user: User = Depends(get_current_user),
    use_case: UpdateButtonSizeUseCase = Depends(get_update_button_size_use_case),
):
    return _update_appearance(use_case, UpdateAppearanceInput(user_id=current_user.id, value=req.value))
