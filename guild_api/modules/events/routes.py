from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse
from guild_api.database.supabase_client import get_supabase
from guild_api.core.dependencies import get_current_user, require_admin
from guild_api.core.errors import EventNotFound, NoEventForRegion
from guild_api.core.validation import validate_region
from guild_api.modules.events.repository import EventsRepository
from guild_api.modules.events.schemas import (
    AutoCreateWeeklyResponse, EventCreatedResponse, EventDetailResponse
)
from guild_api.modules.events.service import EventsService
from guild_api.modules.events.weekly_scheduler import auto_create_weekly_events
from guild_api.modules.teams.repository import TeamsRepository
from supabase import Client
from typing import List, Optional, Dict
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/events", tags=["events"])


def get_events_service(supabase: Client = Depends(get_supabase)) -> EventsService:
    return EventsService(EventsRepository(supabase), TeamsRepository(supabase))


@router.post("/create", response_model=EventCreatedResponse, status_code=201)
async def create_event(
    user_data: Dict = Depends(require_admin),
    service: EventsService = Depends(get_events_service)
):
    """Create an event right now for the admin's region, with default teams"""
    event = service.create_event(user_data["region"])
    return EventCreatedResponse(message="Event created successfully", event=event)


@router.post("/create-weekly", response_model=EventCreatedResponse)
async def create_weekly_event(
    response: Response,
    user_data: Dict = Depends(require_admin),
    service: EventsService = Depends(get_events_service)
):
    """Create this week's event for the admin's region (201), or return the existing one (200)"""
    result = service.create_weekly_event(user_data["region"])
    if not result.created:
        return EventCreatedResponse(message="Event already exists for this week", event=result.event)
    response.status_code = 201
    return EventCreatedResponse(message="Weekly event created", event=result.event)


@router.post("/auto-create-weekly", response_model=AutoCreateWeeklyResponse)
async def auto_create_weekly(supabase: Client = Depends(get_supabase)):
    """Create this week's events for every region (called by the scheduled trigger)"""
    try:
        return auto_create_weekly_events(supabase)
    except Exception as e:
        logger.exception(f"Error creating weekly events: {e}")
        return JSONResponse(status_code=500, content={"error": "Failed to create weekly events"})


@router.get("", response_model=List[EventDetailResponse])
async def list_events(
    region: Optional[str] = None,
    user_data: Dict = Depends(get_current_user),
    service: EventsService = Depends(get_events_service)
):
    """List events of the caller's region, or of ``?region=``"""
    region = region or user_data["region"]
    validate_region(region)
    return service.get_all_events(region)


@router.get("/current", response_model=EventDetailResponse)
async def get_current_event(
    user_data: Dict = Depends(get_current_user),
    service: EventsService = Depends(get_events_service)
):
    """Latest event of the caller's region"""
    event = service.get_latest_event(user_data["region"])
    if not event:
        raise NoEventForRegion()
    return event


@router.get("/current/{region}", response_model=EventDetailResponse)
async def get_current_event_for_region(
    region: str,
    service: EventsService = Depends(get_events_service)
):
    """Latest event of a region (public, used by the signup form)"""
    validate_region(region)
    event = service.get_latest_event(region)
    if not event:
        raise NoEventForRegion()
    return event


@router.get("/{event_id}", response_model=EventDetailResponse)
async def get_event(
    event_id: int,
    user_data: Dict = Depends(get_current_user),
    service: EventsService = Depends(get_events_service)
):
    """Get event by ID with teams and signups"""
    event = service.get_event_by_id(event_id)
    if not event:
        raise EventNotFound()
    return event
