"""
Team endpoints: the public team page and admin profile management.
"""

from fastapi import APIRouter, Depends, Response, status
from typing import List
from uuid import UUID

from brokerage.schemas.error import get_crud_error_responses, get_public_error_responses
from brokerage.schemas.team import (
    PublicTeamMemberResponse,
    TeamMemberCreate,
    TeamMemberResponse,
    TeamMemberUpdate,
    TeamMoveRequest,
    TeamOrderRequest,
)
from brokerage.services.team import TeamService
from brokerage.utils.dependencies import get_current_admin, get_team_service

router = APIRouter(prefix="/team", tags=["Team"])
admin_router = APIRouter(
    prefix="/admin/team",
    tags=["Admin: Team"],
    dependencies=[Depends(get_current_admin)],
    responses=get_crud_error_responses(),
)


@router.get(
    "",
    response_model=List[PublicTeamMemberResponse],
    summary="Active team members",
    description="Contact fields switched off by the member's visibility toggles are null",
    responses=get_public_error_responses()
)
async def list_team(team_service: TeamService = Depends(get_team_service)) -> List[PublicTeamMemberResponse]:
    members = await team_service.list_public()
    return [PublicTeamMemberResponse.from_member(m) for m in members]


@admin_router.get("", response_model=List[TeamMemberResponse], summary="All team members, including inactive")
async def admin_list_team(team_service: TeamService = Depends(get_team_service)) -> List[TeamMemberResponse]:
    members = await team_service.list_all()
    return [TeamMemberResponse.model_validate(m) for m in members]


@admin_router.post(
    "",
    response_model=TeamMemberResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a team member"
)
async def create_member(
    member_data: TeamMemberCreate,
    team_service: TeamService = Depends(get_team_service)
) -> TeamMemberResponse:
    member = await team_service.create_member(member_data)
    return TeamMemberResponse.model_validate(member)


# Declared before /{member_id} routes so "order" is not parsed as an id
@admin_router.put("/order", response_model=List[TeamMemberResponse], summary="Rewrite the display order")
async def reorder_members(
    order: TeamOrderRequest,
    team_service: TeamService = Depends(get_team_service)
) -> List[TeamMemberResponse]:
    members = await team_service.reorder_members(order.member_ids)
    return [TeamMemberResponse.model_validate(m) for m in members]


@admin_router.get("/{member_id}", response_model=TeamMemberResponse, summary="Get team member")
async def get_member(
    member_id: UUID,
    team_service: TeamService = Depends(get_team_service)
) -> TeamMemberResponse:
    member = await team_service.get_member(member_id)
    return TeamMemberResponse.model_validate(member)


@admin_router.patch("/{member_id}", response_model=TeamMemberResponse, summary="Update team member")
async def update_member(
    member_id: UUID,
    member_data: TeamMemberUpdate,
    team_service: TeamService = Depends(get_team_service)
) -> TeamMemberResponse:
    member = await team_service.update_member(member_id, member_data)
    return TeamMemberResponse.model_validate(member)


@admin_router.delete("/{member_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete team member")
async def delete_member(
    member_id: UUID,
    team_service: TeamService = Depends(get_team_service)
) -> Response:
    await team_service.delete_member(member_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@admin_router.post(
    "/{member_id}/move",
    response_model=List[TeamMemberResponse],
    summary="Move a member up or down",
    description="Swaps with the neighbour; a no-op at either end of the list"
)
async def move_member(
    member_id: UUID,
    move: TeamMoveRequest,
    team_service: TeamService = Depends(get_team_service)
) -> List[TeamMemberResponse]:
    members = await team_service.move_member(member_id, move.direction)
    return [TeamMemberResponse.model_validate(m) for m in members]
