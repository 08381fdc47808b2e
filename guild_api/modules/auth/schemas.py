from typing import Optional, List
from datetime import datetime

from guild_api.core.schemas import CamelModel


class LoginRequest(CamelModel):
    username: Optional[str] = None
    password: Optional[str] = None


class LoginUser(CamelModel):
    id: int
    username: str
    region: str
    is_admin: bool = False


class LoginResponse(CamelModel):
    token: str
    user: LoginUser


class SignupRequest(CamelModel):
    username: Optional[str] = None
    primary_class: Optional[List[str]] = None
    secondary_class: Optional[List[str]] = None
    primary_role: Optional[str] = None
    secondary_role: Optional[str] = None
    region: Optional[str] = None
    time_slots: Optional[List[str]] = None
    notes: Optional[str] = None


class DiscordSignupRequest(SignupRequest):
    discord_id: Optional[str] = None


class SignupUser(CamelModel):
    id: int
    username: str
    discord_id: Optional[str] = None
    region: str
    primary_class: Optional[List[str]] = None
    secondary_class: Optional[List[str]] = None
    primary_role: Optional[str] = None
    secondary_role: Optional[str] = None


class SignupEvent(CamelModel):
    id: int
    week_start_date: datetime


class SignupResponse(CamelModel):
    message: str
    user: SignupUser
    event: SignupEvent
    updated: bool
