from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response

from app.api.deps import (
    get_add_link_use_case,
    get_current_user,
    get_delete_link_use_case,
    get_reorder_links_use_case,
    get_toggle_link_use_case,
    get_update_link_use_case,
)
from app.api.schemas.profile import AddLinkRequest, LinkResponse, ReorderLinksRequest, UpdateLinkRequest
from app.application.dto.profile import AddLinkInput, LinkCommandInput, ReorderLinksInput, UpdateLinkInput
from app.application.use_cases.add_link import AddLinkUseCase
from app.application.use_cases.delete_link import DeleteLinkUseCase
from app.application.use_cases.reorder_links import ReorderLinksUseCase
from app.application.use_cases.toggle_link import ToggleLinkUseCase
from app.application.use_cases.update_link import UpdateLinkUseCase
from app.domain.entities.user import User
from app.domain.exceptions import LimitExceededError, LinkNotFoundError, ProfileNotFoundError


router = APIRouter()


@router.post("/v1/links", response_model=LinkResponse, status_code=201)
def add_link(
    req: AddLinkRequest,
    current_user: User = Depends(get_current_user),
    use_case: AddLinkUseCase = Depends(get_add_link_use_case),
):
    try:
        link = use_case.execute(
            AddLinkInput(
                user_id=current_user.id,
                title=req.title,
                url=req.url,
                icon=req.icon,
            )
        )
    except ProfileNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except LimitExceededError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return LinkResponse.from_entity(link)


@router.put("/v1/links/order", response_model=list[LinkResponse])
def reorder_links(
    req: ReorderLinksRequest,
    current_user: User = Depends(get_current_user),
    use_case: ReorderLinksUseCase = Depends(get_reorder_links_use_case),
):
    try:
        links = use_case.execute(ReorderLinksInput(user_id=current_user.id, ordered_ids=req.ordered_ids))
    except (ProfileNotFoundError, LinkNotFoundError) as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return [LinkResponse.from_entity(link) for link in links]


@router.put("/v1/links/{link_id}", response_model=LinkResponse)
def update_link(
    link_id: str,
    req: UpdateLinkRequest,
    current_user: User = Depends(get_current_user),
    use_case: UpdateLinkUseCase = Depends(get_update_link_use_case),
):
    try:
        link = use_case.execute(
            UpdateLinkInput(
                user_id=current_user.id,
                link_id=link_id,
                title=req.title,
                url=req.url,
                icon=req.icon,
                is_enabled=req.is_enabled,
            )
        )
    except (ProfileNotFoundError, LinkNotFoundError) as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return LinkResponse.from_entity(link)


@router.post("/v1/links/{link_id}/toggle", response_model=LinkResponse)
def toggle_link(
    link_id: str,
    current_user: User = Depends(get_current_user),
    use_case: ToggleLinkUseCase = Depends(get_toggle_link_use_case),
):
    try:
        link = use_case.execute(LinkCommandInput(user_id=current_user.id, link_id=link_id))
    except (ProfileNotFoundError, LinkNotFoundError) as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return LinkResponse.from_entity(link)


@router.delete("/v1/links/{link_id}", status_code=204)
def delete_link(
    link_id: str,
    current_user: User = Depends(get_current_user),
    use_case: DeleteLinkUseCase = Depends(get_delete_link_use_case),
):
    try:
        use_case.execute(LinkCommandInput(user_id=current_user.id, link_id=link_id))
    except (ProfileNotFoundError, LinkNotFoundError) as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return Response(status_code=204)
