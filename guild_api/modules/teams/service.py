from guild_api.core.errors import (
    AlreadyMember, CrossRegionForbidden, EventNotFound, MissingField,
    TeamNotFound, UserNotFound, UserRegionMismatch
)
from guild_api.modules.events.repository import EventsRepository
from guild_api.modules.teams.repository import TeamMembersRepository, TeamsRepository
from guild_api.modules.teams.schemas import (
    TeamCreate, TeamDetailResponse, TeamResponse, TeamUpdate
)
from guild_api.modules.users.repository import UsersRepository
from typing import Any, Dict, List, Optional
import logging

logger = logging.getLogger(__name__)


class TeamService:
    """Team CRUD and membership. Every mutation is scoped to the caller's region."""

    def __init__(
        self,
        teams: TeamsRepository,
        members: TeamMembersRepository,
        events: EventsRepository,
        users: UsersRepository,
    ):
        self.teams = teams
        self.members = members
        self.events = events
        self.users = users

    def get_teams_by_event_id(self, event_id: int) -> List[TeamResponse]:
        return [TeamResponse(**team) for team in self.teams.find_by_event_ids([event_id], with_members=True)]

    def get_team_by_id(self, team_id: int) -> Optional[TeamDetailResponse]:
        team = self.teams.find_by_id(team_id)
        if not team:
            return None
        self.teams.attach_members([team])
        team["event"] = self.events.find_by_id(team["event_id"])
        return TeamDetailResponse(**team)

    def create_team(self, region: str, team_data: TeamCreate) -> TeamResponse:
        if not team_data.event_id or not team_data.name:
            raise MissingField("Event ID and team name are required")

        event = self.events.find_by_id(team_data.event_id)
        if not event:
            raise EventNotFound()
        if event["region"] != region:
            raise CrossRegionForbidden("Cannot create team for another region")

        team = self.teams.create({
            "event_id": team_data.event_id,
            "name": team_data.name,
            "description": team_data.description,
            "day": team_data.day or "saturday",
        })
        logger.info(f"Created team {team['id']} ({team['name']}) for event {event['id']}")
        return TeamResponse(**team)

    def update_team(self, region: str, team_id: int, team_data: TeamUpdate) -> TeamResponse:
        team = self._get_team_in_region(team_id, region, "Cannot update team from another region")

        update_data = {}
        if team_data.name:
            update_data["name"] = team_data.name
        if "description" in team_data.model_fields_set:
            update_data["description"] = team_data.description
        if team_data.day:
            update_data["day"] = team_data.day

        if update_data:
            team = self.teams.update(team_id, update_data) or team
        return TeamResponse(**team)

    def delete_team(self, region: str, team_id: int) -> None:
        self._get_team_in_region(team_id, region, "Cannot delete team from another region")
        self.teams.delete(team_id)
        logger.info(f"Deleted team {team_id}")

    def add_member_to_team(self, region: str, team_id: int, user_id: Optional[int]) -> None:
        if not user_id:
            raise MissingField("User ID is required")

        self._get_team_in_region(team_id, region, "Cannot assign members to team from another region")

        target = self.users.find_by_id(user_id)
        if not target:
            raise UserNotFound()
        if target["region"] != region:
            raise UserRegionMismatch()

        if self.members.find(team_id, user_id):
            raise AlreadyMember()

        self.members.add(team_id, user_id)
        logger.info(f"Assigned user {user_id} to team {team_id}")

    def remove_member_from_team(self, region: str, team_id: int, user_id: int) -> None:
        """Remove a membership; removing one that does not exist is not an error"""
        self._get_team_in_region(team_id, region, "Cannot remove members from team in another region")
        if self.members.remove(team_id, user_id):
            logger.info(f"Removed user {user_id} from team {team_id}")

    def _get_team_in_region(self, team_id: int, region: str, message: str) -> Dict[str, Any]:
        team = self.teams.find_by_id(team_id)
        if not team:
            raise TeamNotFound()
        event = self.events.find_by_id(team["event_id"])
        if not event or event["region"] != region:
            raise CrossRegionForbidden(message)
        return team
