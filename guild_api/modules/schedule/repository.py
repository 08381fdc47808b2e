from supabase import Client
from typing import Any, Dict, List, Optional


class ScheduleRepository:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def find_all(self) -> List[Dict[str, Any]]:
        result = self.supabase.table("scheduled_notifications")\
            .select("*")\
            .order("id")\
            .execute()
        return result.data or []

    def find_by_id(self, schedule_id: int) -> Optional[Dict[str, Any]]:
        result = self.supabase.table("scheduled_notifications")\
            .select("*")\
            .eq("id", schedule_id)\
            .limit(1)\
            .execute()
        return result.data[0] if result.data else None

    def find_by_region(self, region: str) -> List[Dict[str, Any]]:
        result = self.supabase.table("scheduled_notifications")\
            .select("*")\
            .eq("region", region)\
            .order("id")\
            .execute()
        return result.data or []

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        result = self.supabase.table("scheduled_notifications").insert(data).execute()
        return result.data[0]

    def update(self, schedule_id: int, data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        result = self.supabase.table("scheduled_notifications")\
            .update(data)\
            .eq("id", schedule_id)\
            .execute()
        return result.data[0] if result.data else None

    def delete(self, schedule_id: int) -> bool:
        result = self.supabase.table("scheduled_notifications")\
            .delete()\
            .eq("id", schedule_id)\
            .execute()
        return len(result.data) > 0
