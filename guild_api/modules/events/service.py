from postgrest.exceptions import APIError
from guild_api.core.constants import DEFAULT_TEAMS
from guild_api.modules.events.repository import EventsRepository
from guild_api.modules.events.schemas import EventDetailResponse, EventResponse, WeeklyEventResult
from guild_api.modules.teams.repository import TeamsRepository
from datetime import datetime, timedelta, timezone
from typing import List, Optional
import logging

logger = logging.getLogger(__name__)

UNIQUE_VIOLATION = "23505"


def current_week_start(now: Optional[datetime] = None) -> datetime:
    """Monday 00:00 UTC of the week containing ``now``"""
    now = (now or datetime.now(timezone.utc)).astimezone(timezone.utc)
    monday = now - timedelta(days=now.weekday())
    return monday.replace(hour=0, minute=0, second=0, microsecond=0)


class EventsService:
    def __init__(self, events: EventsRepository, teams: TeamsRepository):
        self.events = events
        self.teams = teams

    def get_all_events(self, region: str) -> List[EventDetailResponse]:
        return [EventDetailResponse(**event) for event in self.events.find_all(region)]

    def get_event_by_id(self, event_id: int) -> Optional[EventDetailResponse]:
        event = self.events.find_by_id_nested(event_id)
        return EventDetailResponse(**event) if event else None

    def get_latest_event(self, region: str) -> Optional[EventDetailResponse]:
        event = self.events.find_latest_by_region(region, nested=True)
        return EventDetailResponse(**event) if event else None

    def create_event(self, region: str) -> EventResponse:
        """Create an event stamped with the current instant, plus the default teams"""
        event = self._create_with_default_teams(region, datetime.now(timezone.utc))
        logger.info(f"Created event {event['id']} for region {region}")
        return EventResponse(**event)

    def create_weekly_event(self, region: str, now: Optional[datetime] = None) -> WeeklyEventResult:
        """Create this week's event for a region unless it already exists.

        Repeated calls within one week return the same event with
        ``created=False``. Two concurrent calls are settled by the unique
        index on (region, week_start_date): the loser re-reads the winner's row.
        """
        week_start = current_week_start(now)

        existing = self.events.find_by_region_and_week(region, week_start)
        if existing:
            logger.debug(f"Weekly event for {region} ({week_start.date()}) already exists")
            return WeeklyEventResult(created=False, event=EventResponse(**existing))

        try:
            event = self._create_with_default_teams(region, week_start)
        except APIError as e:
            if e.code != UNIQUE_VIOLATION:
                raise
            existing = self.events.find_by_region_and_week(region, week_start)
            if not existing:
                raise
            logger.info(f"Weekly event for {region} ({week_start.date()}) was created concurrently")
            return WeeklyEventResult(created=False, event=EventResponse(**existing))

        logger.info(f"Created weekly event {event['id']} for region {region} ({week_start.date()})")
        return WeeklyEventResult(created=True, event=EventResponse(**event))

    def _create_with_default_teams(self, region: str, week_start_date: datetime) -> dict:
        event = self.events.create(region, week_start_date)
        try:
            self.teams.create_many([
                {
                    "event_id": event["id"],
                    "name": team["name"],
                    "description": team["description"],
                    "day": team["day"],
                }
                for team in DEFAULT_TEAMS
            ])
        except Exception:
            logger.exception(f"Failed to seed default teams for event {event['id']}, rolling back")
            self.events.delete(event["id"])
            raise
        return event
