from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

from app.api.schemas.me import PlanStatusResponse


class GrantDurationRequest(BaseModel):
    days: int | None = None
    months: int | None = None
    years: int | None = None
    lifetime: bool = False


class GrantPlanRequest(BaseModel):
    plan_type: Literal["FREE", "PRO", "DIAMOND"]
    duration: GrantDurationRequest = Field(default_factory=GrantDurationRequest)


class PlanChangeResponse(BaseModel):
    user_id: str
    plan: PlanStatusResponse


class AdminStatsResponse(BaseModel):
    total_users: int
    free_users: int
    pro_users: int
    diamond_users: int
    total_links: int
    total_profile_views: int
    total_link_clicks: int
    total_home_views: int


class AdminUserResponse(BaseModel):
    id: str
    name: str
    email: str
    role: str
    username: str | None
    created_at: datetime
    plan: PlanStatusResponse
