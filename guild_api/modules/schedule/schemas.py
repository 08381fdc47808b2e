from typing import Optional, List
from datetime import datetime

from guild_api.core.constants import Region
from guild_api.core.schemas import CamelModel


class ScheduleCreate(CamelModel):
    title: str
    days: Optional[List[str]] = None
    region: Region
    start_time: str
    end_time: str
    minutes_before: int = 15
    role_mention: Optional[str] = None
    channel_id: str
    enabled: bool = True


class ScheduleUpdate(CamelModel):
    title: Optional[str] = None
    days: Optional[List[str]] = None
    region: Optional[Region] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    minutes_before: Optional[int] = None
    role_mention: Optional[str] = None
    channel_id: Optional[str] = None
    enabled: Optional[bool] = None


class ScheduleResponse(CamelModel):
    id: int
    title: str
    days: Optional[List[str]] = None
    region: str
    start_time: str
    end_time: str
    minutes_before: int
    role_mention: Optional[str] = None
    channel_id: str
    enabled: bool = True
    created_at: Optional[datetime] = None
