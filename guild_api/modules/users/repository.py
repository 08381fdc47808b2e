from supabase import Client
from typing import Any, Dict, List, Optional

PUBLIC_COLUMNS = (
    "id, username, discord_id, region, primary_class, secondary_class, "
    "primary_role, secondary_role, is_admin, created_at"
)


class UsersRepository:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def find_all(self, region: str) -> List[Dict[str, Any]]:
        result = self.supabase.table("users")\
            .select(PUBLIC_COLUMNS)\
            .eq("region", region)\
            .order("created_at")\
            .execute()
        return result.data or []

    def find_by_ids(self, user_ids: List[int]) -> List[Dict[str, Any]]:
        if not user_ids:
            return []
        result = self.supabase.table("users")\
            .select(PUBLIC_COLUMNS)\
            .in_("id", list(user_ids))\
            .execute()
        return result.data or []

    def find_by_id(self, user_id: int) -> Optional[Dict[str, Any]]:
        """Full row, password included. Keep it inside the service layer."""
        return self._first("id", user_id)

    def find_public_by_id(self, user_id: int) -> Optional[Dict[str, Any]]:
        return self._first("id", user_id, PUBLIC_COLUMNS)

    def find_by_username(self, username: str) -> Optional[Dict[str, Any]]:
        return self._first("username", username)

    def find_by_discord_id(self, discord_id: str) -> Optional[Dict[str, Any]]:
        return self._first("discord_id", discord_id)

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        result = self.supabase.table("users").insert(data).execute()
        return result.data[0]

    def update(self, user_id: int, data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        result = self.supabase.table("users")\
            .update(data)\
            .eq("id", user_id)\
            .execute()
        return result.data[0] if result.data else None

    def delete(self, user_id: int) -> bool:
        # team_members and event_signups rows go with it (ON DELETE CASCADE)
        result = self.supabase.table("users")\
            .delete()\
            .eq("id", user_id)\
            .execute()
        return len(result.data) > 0

    def _first(self, column: str, value: Any, columns: str = "*") -> Optional[Dict[str, Any]]:
        result = self.supabase.table("users")\
            .select(columns)\
            .eq(column, value)\
            .limit(1)\
            .execute()
        return result.data[0] if result.data else None
