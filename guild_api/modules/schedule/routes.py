from fastapi import APIRouter, Depends
from guild_api.database.supabase_client import get_supabase
from guild_api.core.dependencies import require_admin
from guild_api.core.schemas import MessageResponse
from guild_api.core.validation import validate_region
from guild_api.modules.schedule.repository import ScheduleRepository
from guild_api.modules.schedule.schemas import ScheduleCreate, ScheduleUpdate, ScheduleResponse
from guild_api.modules.schedule.service import ScheduleService
from supabase import Client
from typing import List, Dict

router = APIRouter(prefix="/schedule", tags=["schedule"])


def get_schedule_service(supabase: Client = Depends(get_supabase)) -> ScheduleService:
    return ScheduleService(ScheduleRepository(supabase))


@router.get("", response_model=List[ScheduleResponse])
async def list_schedules(
    user_data: Dict = Depends(require_admin),
    service: ScheduleService = Depends(get_schedule_service)
):
    """List every scheduled notification"""
    return service.get_all_schedules()


@router.get("/region/{region}", response_model=List[ScheduleResponse])
async def list_region_schedules(
    region: str,
    service: ScheduleService = Depends(get_schedule_service)
):
    """List scheduled notifications of a region (public, read by the notifier)"""
    validate_region(region)
    return service.get_schedules_by_region(region)


@router.post("", response_model=ScheduleResponse, status_code=201)
async def create_schedule(
    schedule_data: ScheduleCreate,
    user_data: Dict = Depends(require_admin),
    service: ScheduleService = Depends(get_schedule_service)
):
    """Create a scheduled notification"""
    return service.create_schedule(schedule_data)


@router.put("/{schedule_id}", response_model=ScheduleResponse)
async def update_schedule(
    schedule_id: int,
    schedule_data: ScheduleUpdate,
    user_data: Dict = Depends(require_admin),
    service: ScheduleService = Depends(get_schedule_service)
):
    """Update a scheduled notification (only the fields provided)"""
    return service.update_schedule(schedule_id, schedule_data)


@router.delete("/{schedule_id}", response_model=MessageResponse)
async def delete_schedule(
    schedule_id: int,
    user_data: Dict = Depends(require_admin),
    service: ScheduleService = Depends(get_schedule_service)
):
    """Delete a scheduled notification"""
    service.delete_schedule(schedule_id)
    return MessageResponse(message="Schedule deleted successfully")
