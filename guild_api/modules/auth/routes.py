from fastapi import APIRouter, Depends, Request, Response
from guild_api.config import settings
from guild_api.database.supabase_client import get_supabase
from guild_api.core.dependencies import get_current_user
from guild_api.core.rate_limit import limiter
from guild_api.modules.auth.schemas import (
    LoginRequest, LoginResponse, SignupRequest, DiscordSignupRequest, SignupResponse
)
from guild_api.modules.auth.service import AuthService
from guild_api.modules.events.repository import EventsRepository
from guild_api.modules.events.signups_repository import SignupsRepository
from guild_api.modules.users.repository import UsersRepository
from guild_api.modules.users.schemas import UserPublic
from supabase import Client
from typing import Dict

router = APIRouter(prefix="/auth", tags=["auth"])


def get_auth_service(supabase: Client = Depends(get_supabase)) -> AuthService:
    return AuthService(
        UsersRepository(supabase),
        EventsRepository(supabase),
        SignupsRepository(supabase),
    )


@router.post("/login", response_model=LoginResponse)
@limiter.limit(settings.auth_rate_limit)
async def login(
    request: Request,
    login_data: LoginRequest,
    service: AuthService = Depends(get_auth_service)
):
    """Admin login, returns a bearer token"""
    return service.login(login_data)


@router.post("/signup", response_model=SignupResponse, status_code=201)
@limiter.limit(settings.auth_rate_limit)
async def signup(
    request: Request,
    response: Response,
    signup_data: SignupRequest,
    service: AuthService = Depends(get_auth_service)
):
    """Sign up for the current event of a region (201), or update an existing signup (200)"""
    result = service.signup(signup_data)
    if result.updated:
        response.status_code = 200
    return result


@router.post("/discord/signup", response_model=SignupResponse, status_code=201)
@limiter.limit(settings.auth_rate_limit)
async def discord_signup(
    request: Request,
    response: Response,
    signup_data: DiscordSignupRequest,
    service: AuthService = Depends(get_auth_service)
):
    """Signup coming from the Discord bot, keyed by Discord ID"""
    result = service.discord_signup(signup_data)
    if result.updated:
        response.status_code = 200
    return result


@router.get("/me", response_model=UserPublic)
async def get_me(
    current_user: Dict = Depends(get_current_user),
    service: AuthService = Depends(get_auth_service)
):
    """Get the profile behind the bearer token"""
    return service.get_current_user(current_user["id"])
