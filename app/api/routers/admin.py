from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from app.api.deps import (
    get_current_principal,
    get_get_admin_stats_use_case,
    get_grant_plan_use_case,
    get_list_users_use_case,
    get_remove_plan_use_case,
)
from app.api.schemas.admin import (
    AdminStatsResponse,
    AdminUserResponse,
    GrantPlanRequest,
    PlanChangeResponse,
)
from app.api.schemas.me import PlanStatusResponse
from app.application.dto.admin import ListUsersInput
from app.application.dto.entitlements import GrantPlanInput, PlanChangeOutput, RemovePlanInput
from app.application.use_cases.get_admin_stats import GetAdminStatsUseCase
from app.application.use_cases.grant_plan import GrantPlanUseCase
from app.application.use_cases.list_users import ListUsersUseCase
from app.application.use_cases.remove_plan import RemovePlanUseCase
from app.domain.entities.plan import GrantDuration, Principal
from app.domain.exceptions import InvalidGrantDurationError, UnauthorizedError, UserNotFoundError


router = APIRouter()


def _plan_change_response(output: PlanChangeOutput) -> PlanChangeResponse:
    return PlanChangeResponse(
        user_id=output.user_id,
        plan=PlanStatusResponse.from_output(output.status),
    )


@router.put("/v1/admin/users/{user_id}/plan", response_model=PlanChangeResponse)
def grant_plan(
    user_id: str,
    req: GrantPlanRequest,
    principal: Principal = Depends(get_current_principal),
    use_case: GrantPlanUseCase = Depends(get_grant_plan_use_case),
):
    try:
        output = use_case.execute(
            GrantPlanInput(
                actor=principal,
                user_id=user_id,
                plan_type=req.plan_type,
                duration=GrantDuration(
                    days=req.duration.days,
                    months=req.duration.months,
                    years=req.duration.years,
                    lifetime=req.duration.lifetime,
                ),
            )
        )
    except UnauthorizedError as exc:
        raise HTTPException(status_code=403, detail=str(exc)) from exc
    except UserNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except InvalidGrantDurationError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return _plan_change_response(output)


@router.delete("/v1/admin/users/{user_id}/plan", response_model=PlanChangeResponse)
def remove_plan(
    user_id: str,
    principal: Principal = Depends(get_current_principal),
    use_case: RemovePlanUseCase = Depends(get_remove_plan_use_case),
):
    try:
        output = use_case.execute(RemovePlanInput(actor=principal, user_id=user_id))
    except UnauthorizedError as exc:
        raise HTTPException(status_code=403, detail=str(exc)) from exc
    except UserNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return _plan_change_response(output)


@router.get("/v1/admin/stats", response_model=AdminStatsResponse)
def get_admin_stats(
    principal: Principal = Depends(get_current_principal),
    use_case: GetAdminStatsUseCase = Depends(get_get_admin_stats_use_case),
):
    try:
        stats = use_case.execute(actor=principal)
    except UnauthorizedError as exc:
        raise HTTPException(status_code=403, detail=str(exc)) from exc

    return AdminStatsResponse(
        total_users=stats.total_users,
        free_users=stats.free_users,
        pro_users=stats.pro_users,
        diamond_users=stats.diamond_users,
        total_links=stats.total_links,
        total_profile_views=stats.total_profile_views,
        total_link_clicks=stats.total_link_clicks,
        total_home_views=stats.total_home_views,
    )


@router.get("/v1/admin/users", response_model=list[AdminUserResponse])
def list_users(
    query: str = "",
    principal: Principal = Depends(get_current_principal),
    use_case: ListUsersUseCase = Depends(get_list_users_use_case),
):
    try:
        users = use_case.execute(ListUsersInput(actor=principal, query=query))
    except UnauthorizedError as exc:
        raise HTTPException(status_code=403, detail=str(exc)) from exc

    return [
        AdminUserResponse(
            id=item.id,
            name=item.name,
            email=item.email,
            role=item.role,
            username=item.username,
            created_at=item.created_at,
            plan=PlanStatusResponse.from_output(item.plan),
        )
        for item in users
    ]
