from __future__ import annotations

from datetime import datetime, timedelta
from typing import Callable

from app.application.dto.analytics import ProfileAnalyticsOutput
from app.application.ports.analytics_port import AnalyticsPort
from app.application.ports.profile_port import ProfilePort
from app.domain.services.analytics import DAILY_WINDOW_DAYS, build_daily_stats, build_link_stats
from app.domain.services.entitlements import is_pro

from .auth_common import utcnow
from .profile_common import load_owned_profile


class GetProfileAnalyticsUseCase:
    def __init__(
        self,
        *,
        profile_port: ProfilePort,
        analytics_port: AnalyticsPort,
        clock: Callable[[], datetime] = utcnow,
    ):
        self._profile_port = profile_port
        self._analytics_port = analytics_port
        self._clock = clock

    def execute(self, *, user_id: str) -> ProfileAnalyticsOutput:
        profile, owner = load_owned_profile(self._profile_port, user_id=user_id)
        now = self._clock()

        total_views = self._analytics_port.count_profile_views(profile_page_id=profile.id)
        total_clicks = self._analytics_port.count_link_clicks(profile_page_id=profile.id)

        if not is_pro(owner.plan_state, now=now):
            return ProfileAnalyticsOutput(
                total_views=total_views,
                total_clicks=total_clicks,
                detailed=False,
                links=[],
                daily=[],
            )

        since = now - timedelta(days=DAILY_WINDOW_DAYS)
        clicks = self._analytics_port.list_link_clicks(profile_page_id=profile.id)
        recent_views = self._analytics_port.list_profile_views(profile_page_id=profile.id, since=since)
        recent_clicks = [click for click in clicks if click.created_at >= since]

        return ProfileAnalyticsOutput(
            total_views=total_views,
            total_clicks=total_clicks,
            detailed=True,
            links=build_link_stats(clicks),
            daily=build_daily_stats(views=recent_views, clicks=recent_clicks, today=now.date()),
        )
