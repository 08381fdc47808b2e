from fastapi import APIRouter, Depends
from guild_api.database.supabase_client import get_supabase
from guild_api.core.dependencies import get_current_user, require_admin
from guild_api.core.errors import UserNotFound
from guild_api.core.schemas import MessageResponse
from guild_api.modules.teams.repository import TeamMembersRepository
from guild_api.modules.users.repository import UsersRepository
from guild_api.modules.users.schemas import UserPublic, UserUpdate
from guild_api.modules.users.service import UserService
from supabase import Client
from typing import List, Dict

router = APIRouter(prefix="/users", tags=["users"])


def get_user_service(supabase: Client = Depends(get_supabase)) -> UserService:
    return UserService(UsersRepository(supabase), TeamMembersRepository(supabase))


@router.get("", response_model=List[UserPublic])
async def list_users(
    user_data: Dict = Depends(require_admin),
    service: UserService = Depends(get_user_service)
):
    """List users of the admin's region"""
    return service.get_all_users(user_data["region"])


@router.get("/{user_id}", response_model=UserPublic)
async def get_user(
    user_id: int,
    user_data: Dict = Depends(get_current_user),
    service: UserService = Depends(get_user_service)
):
    """Get user by ID"""
    user = service.get_user_by_id(user_id)
    if not user:
        raise UserNotFound()
    return user


@router.put("/{user_id}", response_model=UserPublic)
async def update_user(
    user_id: int,
    user_data_body: UserUpdate,
    user_data: Dict = Depends(get_current_user),
    service: UserService = Depends(get_user_service)
):
    """Update own profile, or another user's as an admin of the same region"""
    return service.update_user(user_data, user_id, user_data_body)


@router.delete("/{user_id}", response_model=MessageResponse)
async def delete_user(
    user_id: int,
    user_data: Dict = Depends(require_admin),
    service: UserService = Depends(get_user_service)
):
    """Delete a user of the admin's region"""
    service.delete_user(user_data, user_id)
    return MessageResponse(message="User deleted successfully")
