from supabase import Client
from guild_api.modules.events.signups_repository import SignupsRepository
from guild_api.modules.teams.repository import TeamsRepository
from datetime import datetime
from typing import Any, Dict, List, Optional


class EventsRepository:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def find_all(self, region: str) -> List[Dict[str, Any]]:
        """Events of a region, newest week first, with flat teams and signups"""
        result = self.supabase.table("events")\
            .select("*")\
            .eq("region", region)\
            .order("week_start_date", desc=True)\
            .execute()
        events = result.data or []
        event_ids = [e["id"] for e in events]
        teams = TeamsRepository(self.supabase).find_by_event_ids(event_ids)
        signups = SignupsRepository(self.supabase).find_by_event_ids(event_ids)
        return self._attach(events, teams, signups)

    def find_by_id(self, event_id: int) -> Optional[Dict[str, Any]]:
        result = self.supabase.table("events")\
            .select("*")\
            .eq("id", event_id)\
            .limit(1)\
            .execute()
        return result.data[0] if result.data else None

    def find_by_id_nested(self, event_id: int) -> Optional[Dict[str, Any]]:
        event = self.find_by_id(event_id)
        return self._with_details(event) if event else None

    def find_latest_by_region(self, region: str, nested: bool = False) -> Optional[Dict[str, Any]]:
        """Most recently created event of a region"""
        result = self.supabase.table("events")\
            .select("*")\
            .eq("region", region)\
            .order("created_at", desc=True)\
            .order("id", desc=True)\
            .limit(1)\
            .execute()
        if not result.data:
            return None
        event = result.data[0]
        return self._with_details(event) if nested else event

    def find_by_region_and_week(self, region: str, week_start_date: datetime) -> Optional[Dict[str, Any]]:
        result = self.supabase.table("events")\
            .select("*")\
            .eq("region", region)\
            .eq("week_start_date", week_start_date.isoformat())\
            .limit(1)\
            .execute()
        return result.data[0] if result.data else None

    def create(self, region: str, week_start_date: datetime) -> Dict[str, Any]:
        result = self.supabase.table("events").insert({
            "region": region,
            "week_start_date": week_start_date.isoformat(),
        }).execute()
        return result.data[0]

    def delete(self, event_id: int) -> bool:
        result = self.supabase.table("events")\
            .delete()\
            .eq("id", event_id)\
            .execute()
        return len(result.data) > 0

    def _with_details(self, event: Dict[str, Any]) -> Dict[str, Any]:
        """Attach teams -> members -> user and signups -> user"""
        teams = TeamsRepository(self.supabase).find_by_event_ids([event["id"]], with_members=True)
        signups = SignupsRepository(self.supabase).find_by_event_ids([event["id"]], with_user=True)
        return self._attach([event], teams, signups)[0]

    @staticmethod
    def _attach(events, teams, signups) -> List[Dict[str, Any]]:
        for event in events:
            event["teams"] = [t for t in teams if t["event_id"] == event["id"]]
            event["signups"] = [s for s in signups if s["event_id"] == event["id"]]
        return events
