from typing import Optional, List
from datetime import datetime

from guild_api.core.constants import Day
from guild_api.core.schemas import CamelModel
from guild_api.modules.users.schemas import UserPublic


class TeamCreate(CamelModel):
    event_id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    day: Optional[Day] = None


class TeamUpdate(CamelModel):
    name: Optional[str] = None
    description: Optional[str] = None
    day: Optional[Day] = None


class TeamMemberAdd(CamelModel):
    user_id: Optional[int] = None


class TeamMemberResponse(CamelModel):
    team_id: int
    user_id: int
    assigned_at: Optional[datetime] = None
    user: Optional[UserPublic] = None


class TeamEvent(CamelModel):
    id: int
    region: str
    week_start_date: datetime
    created_at: Optional[datetime] = None


class TeamResponse(CamelModel):
    id: int
    event_id: int
    name: str
    description: Optional[str] = None
    day: str
    created_at: Optional[datetime] = None
    members: Optional[List[TeamMemberResponse]] = None


class TeamDetailResponse(TeamResponse):
    event: Optional[TeamEvent] = None
