from __future__ import annotations

from fastapi import APIRouter, Depends, Header, HTTPException
from fastapi.responses import RedirectResponse

from app.api.deps import (
    get_get_public_profile_use_case,
    get_track_home_visit_use_case,
    get_track_link_click_use_case,
    get_track_profile_view_use_case,
)
from app.api.schemas.analytics import TrackResponse
from app.api.schemas.profile import LinkResponse, ProfilePageResponse, PublicProfileResponse
from app.application.dto.analytics import TrackHomeVisitInput, TrackLinkClickInput, TrackProfileViewInput
from app.application.use_cases.get_public_profile import GetPublicProfileUseCase
from app.application.use_cases.track_link_click import TrackLinkClickUseCase
from app.application.use_cases.track_profile_view import TrackHomeVisitUseCase, TrackProfileViewUseCase
from app.domain.exceptions import ProfileNotFoundError


router = APIRouter()


@router.get("/v1/public/{username}", response_model=PublicProfileResponse)
def get_public_profile(
    username: str,
    use_case: GetPublicProfileUseCase = Depends(get_get_public_profile_use_case),
):
    try:
        output = use_case.execute(username=username)
    except ProfileNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc

    return PublicProfileResponse(
        profile=ProfilePageResponse.from_entity(output.profile),
        links=[LinkResponse.from_entity(link) for link in output.links],
        is_pro=output.is_pro,
        plan_badge=output.plan_badge,
    )


@router.post("/v1/public/profiles/{profile_page_id}/views", response_model=TrackResponse)
def track_profile_view(
    profile_page_id: str,
    user_agent: str | None = Header(default=None),
    referer: str | None = Header(default=None),
    use_case: TrackProfileViewUseCase = Depends(get_track_profile_view_use_case),
):
    ok = use_case.execute(
        TrackProfileViewInput(
            profile_page_id=profile_page_id,
            user_agent=user_agent,
            referer=referer,
        )
    )
    return TrackResponse(ok=ok)


@router.post("/v1/public/home-visits", response_model=TrackResponse)
def track_home_visit(
    user_agent: str | None = Header(default=None),
    referer: str | None = Header(default=None),
    use_case: TrackHomeVisitUseCase = Depends(get_track_home_visit_use_case),
):
    ok = use_case.execute(TrackHomeVisitInput(user_agent=user_agent, referer=referer))
    return TrackResponse(ok=ok)


@router.get("/r/{link_id}")
def track_link_click(
    link_id: str,
    user_agent: str | None = Header(default=None),
    referer: str | None = Header(default=None),
    x_vercel_ip_country: str | None = Header(default=None),
    x_country: str | None = Header(default=None),
    use_case: TrackLinkClickUseCase = Depends(get_track_link_click_use_case),
):
    output = use_case.execute(
        TrackLinkClickInput(
            link_id=link_id,
            user_agent=user_agent,
            referer=referer,
            country=x_vercel_ip_country or x_country,
        )
    )
    return RedirectResponse(url=output.redirect_url or "/", status_code=307)
