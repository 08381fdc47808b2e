from supabase import Client
from guild_api.modules.users.repository import UsersRepository
from typing import Any, Dict, List, Optional


class TeamsRepository:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def find_by_id(self, team_id: int) -> Optional[Dict[str, Any]]:
        result = self.supabase.table("teams")\
            .select("*")\
            .eq("id", team_id)\
            .limit(1)\
            .execute()
        return result.data[0] if result.data else None

    def find_by_event_ids(self, event_ids: List[int], with_members: bool = False) -> List[Dict[str, Any]]:
        """Teams of the given events; ``with_members`` attaches members -> user"""
        if not event_ids:
            return []
        result = self.supabase.table("teams")\
            .select("*")\
            .in_("event_id", list(event_ids))\
            .order("id")\
            .execute()
        teams = result.data or []
        if with_members:
            self.attach_members(teams)
        return teams

    def attach_members(self, teams: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        team_ids = [t["id"] for t in teams]
        members = TeamMembersRepository(self.supabase).find_by_team_ids(team_ids, with_user=True)
        by_team: Dict[int, List[Dict[str, Any]]] = {team_id: [] for team_id in team_ids}
        for member in members:
            by_team.setdefault(member["team_id"], []).append(member)
        for team in teams:
            team["members"] = by_team.get(team["id"], [])
        return teams

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        result = self.supabase.table("teams").insert(data).execute()
        return result.data[0]

    def create_many(self, rows: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """Insert all rows in one statement, so either every team lands or none does"""
        result = self.supabase.table("teams").insert(rows).execute()
        return result.data or []

    def update(self, team_id: int, data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        result = self.supabase.table("teams")\
            .update(data)\
            .eq("id", team_id)\
            .execute()
        return result.data[0] if result.data else None

    def delete(self, team_id: int) -> bool:
        result = self.supabase.table("teams")\
            .delete()\
            .eq("id", team_id)\
            .execute()
        return len(result.data) > 0


class TeamMembersRepository:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def find(self, team_id: int, user_id: int) -> Optional[Dict[str, Any]]:
        result = self.supabase.table("team_members")\
            .select("*")\
            .eq("team_id", team_id)\
            .eq("user_id", user_id)\
            .limit(1)\
            .execute()
        return result.data[0] if result.data else None

    def find_by_team_ids(self, team_ids: List[int], with_user: bool = False) -> List[Dict[str, Any]]:
        if not team_ids:
            return []
        result = self.supabase.table("team_members")\
            .select("*")\
            .in_("team_id", list(team_ids))\
            .order("assigned_at")\
            .execute()
        members = result.data or []
        if with_user and members:
            user_ids = list({m["user_id"] for m in members})
            users = {u["id"]: u for u in UsersRepository(self.supabase).find_by_ids(user_ids)}
            for member in members:
                member["user"] = users.get(member["user_id"])
        return members

    def add(self, team_id: int, user_id: int) -> Dict[str, Any]:
        result = self.supabase.table("team_members").insert({
            "team_id": team_id,
            "user_id": user_id,
        }).execute()
        return result.data[0]

    def remove(self, team_id: int, user_id: int) -> bool:
        result = self.supabase.table("team_members")\
            .delete()\
            .eq("team_id", team_id)\
            .eq("user_id", user_id)\
            .execute()
        return len(result.data) > 0

    def remove_all_for_user(self, user_id: int) -> int:
        result = self.supabase.table("team_members")\
            .delete()\
            .eq("user_id", user_id)\
            .execute()
        return len(result.data)
