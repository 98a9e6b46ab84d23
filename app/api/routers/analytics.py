from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from app.api.deps import get_current_user, get_get_profile_analytics_use_case
from app.api.schemas.analytics import DailyStatsResponse, LinkStatsResponse, ProfileAnalyticsResponse
from app.application.use_cases.get_profile_analytics import GetProfileAnalyticsUseCase
from app.domain.entities.user import User
from app.domain.exceptions import ProfileNotFoundError


router = APIRouter()


@router.get("/v1/analytics", response_model=ProfileAnalyticsResponse)
def get_profile_analytics(
    current_user: User = Depends(get_current_user),
    use_case: GetProfileAnalyticsUseCase = Depends(get_get_profile_analytics_use_case),
):
    try:
        output = use_case.execute(user_id=current_user.id)
    except ProfileNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc

    return ProfileAnalyticsResponse(
        total_views=output.total_views,
        total_clicks=output.total_clicks,
        detailed=output.detailed,
        links=[
            LinkStatsResponse(
                title=item.title,
                url=item.url,
                clicks=item.clicks,
                last_click_at=item.last_click_at,
                deleted=item.deleted,
            )
            for item in output.links
        ],
        daily=[DailyStatsResponse(day=item.day, views=item.views, clicks=item.clicks) for item in output.daily],
    )
