from typing import Optional, List
from datetime import datetime

from guild_api.core.schemas import CamelModel
from guild_api.modules.teams.schemas import TeamResponse
from guild_api.modules.users.schemas import UserPublic


class SignupResponse(CamelModel):
    event_id: int
    user_id: int
    time_slots: List[str] = []
    notes: Optional[str] = None
    signed_up_at: Optional[datetime] = None
    user: Optional[UserPublic] = None


class EventResponse(CamelModel):
    id: int
    region: str
    week_start_date: datetime
    created_at: Optional[datetime] = None


class EventDetailResponse(EventResponse):
    teams: List[TeamResponse] = []
    signups: List[SignupResponse] = []


class EventCreatedResponse(CamelModel):
    message: str
    event: EventResponse


class WeeklyEventResult(CamelModel):
    created: bool
    event: EventResponse


class AutoCreateWeeklyResponse(CamelModel):
    vn: WeeklyEventResult
    na: WeeklyEventResult
