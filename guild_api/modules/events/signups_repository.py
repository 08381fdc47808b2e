from supabase import Client
from guild_api.modules.users.repository import UsersRepository
from typing import Any, Dict, List, Optional


class SignupsRepository:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def find_by_event_and_user(self, event_id: int, user_id: int) -> Optional[Dict[str, Any]]:
        result = self.supabase.table("event_signups")\
            .select("*")\
            .eq("event_id", event_id)\
            .eq("user_id", user_id)\
            .limit(1)\
            .execute()
        return result.data[0] if result.data else None

    def find_by_event_ids(self, event_ids: List[int], with_user: bool = False) -> List[Dict[str, Any]]:
        if not event_ids:
            return []
        result = self.supabase.table("event_signups")\
            .select("*")\
            .in_("event_id", list(event_ids))\
            .order("signed_up_at")\
            .execute()
        signups = result.data or []
        if with_user and signups:
            user_ids = list({s["user_id"] for s in signups})
            users = {u["id"]: u for u in UsersRepository(self.supabase).find_by_ids(user_ids)}
            for signup in signups:
                signup["user"] = users.get(signup["user_id"])
        return signups

    def create(self, event_id: int, user_id: int, time_slots: List[str], notes: Optional[str]) -> Dict[str, Any]:
        result = self.supabase.table("event_signups").insert({
            "event_id": event_id,
            "user_id": user_id,
            "time_slots": list(time_slots),
            "notes": notes,
        }).execute()
        return result.data[0]

    def update(self, event_id: int, user_id: int, time_slots: List[str], notes: Optional[str]) -> Optional[Dict[str, Any]]:
        result = self.supabase.table("event_signups")\
            .update({"time_slots": list(time_slots), "notes": notes})\
            .eq("event_id", event_id)\
            .eq("user_id", user_id)\
            .execute()
        return result.data[0] if result.data else None
