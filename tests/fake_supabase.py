"""
In-memory stand-in for the parts of the supabase ``Client`` the repositories use:
``table().select/insert/update/delete().eq/in_/order/limit().execute()``.

It mimics the schema in guild_api/database/schema.sql closely enough for the
service rules to be exercised: identity ids, column defaults, unique keys
(raising postgrest ``APIError`` with code 23505) and ON DELETE CASCADE.
"""

import copy
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

from postgrest.exceptions import APIError

IDENTITY_TABLES = {"users", "events", "teams", "scheduled_notifications"}

TIMESTAMP_COLUMN = {
    "team_members": "assigned_at",
    "event_signups": "signed_up_at",
}

DEFAULTS = {
    "users": {"is_admin": False, "password": None, "discord_id": None,
              "secondary_class": None, "secondary_role": None},
    "teams": {"day": "saturday", "description": None},
    "event_signups": {"notes": None, "time_slots": []},
    "scheduled_notifications": {"enabled": True, "minutes_before": 15,
                                "days": None, "role_mention": None},
}

UNIQUE_KEYS = {
    "users": [("username",), ("discord_id",)],
    "events": [("region", "week_start_date")],
    "team_members": [("team_id", "user_id")],
    "event_signups": [("event_id", "user_id")],
}

CASCADES = {
    "events": [("teams", "event_id"), ("event_signups", "event_id")],
    "teams": [("team_members", "team_id")],
    "users": [("team_members", "user_id"), ("event_signups", "user_id")],
}


class FakeResponse:
    def __init__(self, data: List[Dict[str, Any]]):
        self.data = data


class FakeQuery:
    def __init__(self, db: "FakeSupabase", table: str):
        self.db = db
        self.table_name = table
        self.operation = "select"
        self.columns: Optional[List[str]] = None
        self.payload: Any = None
        self.filters: List = []
        self.orders: List = []
        self.row_limit: Optional[int] = None

    def select(self, columns: str = "*"):
        self.operation = "select"
        if columns.strip() != "*":
            self.columns = [c.strip() for c in columns.split(",")]
        return self

    def insert(self, payload):
        self.operation = "insert"
        self.payload = payload
        return self

    def update(self, payload: Dict[str, Any]):
        self.operation = "update"
        self.payload = payload
        return self

    def delete(self):
        self.operation = "delete"
        return self

    def eq(self, column: str, value: Any):
        self.filters.append(lambda row: row.get(column) == value)
        return self

    def in_(self, column: str, values: List[Any]):
        values = list(values)
        self.filters.append(lambda row: row.get(column) in values)
        return self

    def order(self, column: str, desc: bool = False):
        self.orders.append((column, desc))
        return self

    def limit(self, count: int):
        self.row_limit = count
        return self

    def execute(self) -> FakeResponse:
        handler = getattr(self, f"_execute_{self.operation}")
        return FakeResponse(copy.deepcopy(handler()))

    def _matching(self) -> List[Dict[str, Any]]:
        return [row for row in self.db.rows(self.table_name) if all(f(row) for f in self.filters)]

    def _execute_select(self):
        rows = self._matching()
        for column, desc in reversed(self.orders):
            rows = sorted(rows, key=lambda r: (r.get(column) is None, r.get(column)), reverse=desc)
        if self.row_limit is not None:
            rows = rows[:self.row_limit]
        if self.columns:
            rows = [{c: row.get(c) for c in self.columns} for row in rows]
        return rows

    def _execute_insert(self):
        error = self.db.insert_errors.pop(self.table_name, None)
        if error:
            raise error
        payload = self.payload if isinstance(self.payload, list) else [self.payload]
        new_rows = [self.db.build_row(self.table_name, item) for item in payload]
        table = self.db.rows(self.table_name)
        pending = []
        for row in new_rows:
            self.db.check_unique(self.table_name, row, table + pending)
            pending.append(row)
        table.extend(pending)
        return pending

    def _execute_update(self):
        updated = []
        for row in self._matching():
            candidate = {**row, **copy.deepcopy(self.payload)}
            others = [r for r in self.db.rows(self.table_name) if r is not row]
            self.db.check_unique(self.table_name, candidate, others)
            row.update(copy.deepcopy(self.payload))
            updated.append(row)
        return updated

    def _execute_delete(self):
        doomed = self._matching()
        for row in doomed:
            self.db.delete_row(self.table_name, row)
        return doomed


class FakeSupabase:
    def __init__(self):
        self.tables: Dict[str, List[Dict[str, Any]]] = {}
        self.sequences: Dict[str, int] = {}
        self.insert_errors: Dict[str, Exception] = {}
        self._clock = datetime(2026, 1, 1, tzinfo=timezone.utc)

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)

    def rows(self, name: str) -> List[Dict[str, Any]]:
        return self.tables.setdefault(name, [])

    def fail_next_insert(self, table: str, error: Exception):
        self.insert_errors[table] = error

    def now(self) -> str:
        # Strictly increasing so ordering by timestamp is deterministic
        self._clock += timedelta(seconds=1)
        return self._clock.isoformat()

    def build_row(self, table: str, data: Dict[str, Any]) -> Dict[str, Any]:
        row = copy.deepcopy(DEFAULTS.get(table, {}))
        row.update(copy.deepcopy(data))
        if table in IDENTITY_TABLES and row.get("id") is None:
            self.sequences[table] = self.sequences.get(table, 0) + 1
            row["id"] = self.sequences[table]
        stamp = TIMESTAMP_COLUMN.get(table, "created_at")
        row.setdefault(stamp, self.now())
        return row

    def check_unique(self, table: str, row: Dict[str, Any], others: List[Dict[str, Any]]):
        for key in UNIQUE_KEYS.get(table, []):
            values = tuple(row.get(c) for c in key)
            if any(v is None for v in values):
                continue
            if any(tuple(o.get(c) for c in key) == values for o in others):
                raise APIError({
                    "message": f'duplicate key value violates unique constraint on {table} {key}',
                    "code": "23505",
                    "details": None,
                    "hint": None,
                })

    def delete_row(self, table: str, row: Dict[str, Any]):
        rows = self.rows(table)
        if row in rows:
            rows.remove(row)
        for child_table, column in CASCADES.get(table, []):
            for child in [c for c in self.rows(child_table) if c.get(column) == row.get("id")]:
                self.delete_row(child_table, child)

    def insert_row(self, table: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """Direct insert for test setup"""
        return self.table(table).insert(data).execute().data[0]
