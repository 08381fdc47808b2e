from typing import Optional, List
from datetime import datetime

from guild_api.core.schemas import CamelModel


class UserPublic(CamelModel):
    id: int
    username: str
    discord_id: Optional[str] = None
    region: str
    primary_class: Optional[List[str]] = None
    secondary_class: Optional[List[str]] = None
    primary_role: Optional[str] = None
    secondary_role: Optional[str] = None
    is_admin: bool = False
    created_at: Optional[datetime] = None


class UserUpdate(CamelModel):
    primary_class: Optional[List[str]] = None
    secondary_class: Optional[List[str]] = None
    primary_role: Optional[str] = None
    secondary_role: Optional[str] = None
