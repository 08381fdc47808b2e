"""
Weekly Event Job
Ensures every region has an event for the current week. Safe to run as
often as the cron likes: existing events are left alone.
Run with: python -m guild_api.scripts.create_weekly_events
"""

import sys
import logging

from guild_api.core.constants import REGIONS
from guild_api.database.supabase_client import SupabaseClient
from guild_api.modules.events.weekly_scheduler import auto_create_weekly_events

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main():
    try:
        results = auto_create_weekly_events(SupabaseClient.get_service_client())
        for region in REGIONS:
            result = getattr(results, region)
            state = "created" if result.created else "already exists"
            logger.info(f"{region}: event {result.event.id} {state}")
    except Exception as e:
        logger.error(f"Error creating weekly events: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
