import asyncio
import logging
from supabase import Client
from guild_api.config import settings
from guild_api.core.constants import REGIONS
from guild_api.database.supabase_client import SupabaseClient
from guild_api.modules.events.repository import EventsRepository
from guild_api.modules.events.schemas import AutoCreateWeeklyResponse
from guild_api.modules.events.service import EventsService
from guild_api.modules.teams.repository import TeamsRepository

logger = logging.getLogger(__name__)


def auto_create_weekly_events(supabase: Client) -> AutoCreateWeeklyResponse:
    """Make sure every region has an event for the current week"""
    service = EventsService(EventsRepository(supabase), TeamsRepository(supabase))
    results = {region: service.create_weekly_event(region) for region in REGIONS}
    created = [region for region, result in results.items() if result.created]
    if created:
        logger.info(f"Weekly events created for: {', '.join(created)}")
    else:
        logger.debug("Weekly events already exist for all regions")
    return AutoCreateWeeklyResponse(**results)


async def weekly_scheduler_loop():
    """Background task that periodically ensures this week's events exist"""
    while True:
        try:
            await asyncio.to_thread(auto_create_weekly_events, SupabaseClient.get_service_client())
        except Exception as e:
            logger.error(f"Error in weekly event scheduler: {str(e)}")

        await asyncio.sleep(settings.weekly_scheduler_interval_seconds)
