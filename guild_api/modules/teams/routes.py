from fastapi import APIRouter, Depends
from guild_api.database.supabase_client import get_supabase
from guild_api.core.dependencies import get_current_user, require_admin
from guild_api.core.errors import TeamNotFound
from guild_api.core.schemas import MessageResponse
from guild_api.modules.events.repository import EventsRepository
from guild_api.modules.teams.repository import TeamMembersRepository, TeamsRepository
from guild_api.modules.teams.schemas import (
    TeamCreate, TeamUpdate, TeamResponse, TeamDetailResponse, TeamMemberAdd
)
from guild_api.modules.teams.service import TeamService
from guild_api.modules.users.repository import UsersRepository
from supabase import Client
from typing import List, Dict

router = APIRouter(prefix="/teams", tags=["teams"])


def get_team_service(supabase: Client = Depends(get_supabase)) -> TeamService:
    return TeamService(
        TeamsRepository(supabase),
        TeamMembersRepository(supabase),
        EventsRepository(supabase),
        UsersRepository(supabase),
    )


@router.get("/event/{event_id}", response_model=List[TeamResponse])
async def list_event_teams(
    event_id: int,
    user_data: Dict = Depends(get_current_user),
    service: TeamService = Depends(get_team_service)
):
    """List teams of an event with their members"""
    return service.get_teams_by_event_id(event_id)


@router.get("/{team_id}", response_model=TeamDetailResponse)
async def get_team(
    team_id: int,
    user_data: Dict = Depends(get_current_user),
    service: TeamService = Depends(get_team_service)
):
    """Get team by ID with its event and members"""
    team = service.get_team_by_id(team_id)
    if not team:
        raise TeamNotFound()
    return team


@router.post("", response_model=TeamResponse, status_code=201)
async def create_team(
    team_data: TeamCreate,
    user_data: Dict = Depends(require_admin),
    service: TeamService = Depends(get_team_service)
):
    """Create a team in an event of the admin's region"""
    return service.create_team(user_data["region"], team_data)


@router.put("/{team_id}", response_model=TeamResponse)
async def update_team(
    team_id: int,
    team_data: TeamUpdate,
    user_data: Dict = Depends(require_admin),
    service: TeamService = Depends(get_team_service)
):
    """Update team (only the fields provided)"""
    return service.update_team(user_data["region"], team_id, team_data)


@router.delete("/{team_id}", response_model=MessageResponse)
async def delete_team(
    team_id: int,
    user_data: Dict = Depends(require_admin),
    service: TeamService = Depends(get_team_service)
):
    """Delete team"""
    service.delete_team(user_data["region"], team_id)
    return MessageResponse(message="Team deleted")


@router.post("/{team_id}/members", response_model=MessageResponse, status_code=201)
async def add_team_member(
    team_id: int,
    member_data: TeamMemberAdd,
    user_data: Dict = Depends(require_admin),
    service: TeamService = Depends(get_team_service)
):
    """Assign a user of the same region to the team"""
    service.add_member_to_team(user_data["region"], team_id, member_data.user_id)
    return MessageResponse(message="User assigned to team")


@router.delete("/{team_id}/members/{user_id}", response_model=MessageResponse)
async def remove_team_member(
    team_id: int,
    user_id: int,
    user_data: Dict = Depends(require_admin),
    service: TeamService = Depends(get_team_service)
):
    """Remove a user from the team"""
    service.remove_member_from_team(user_data["region"], team_id, user_id)
    return MessageResponse(message="User removed from team")
