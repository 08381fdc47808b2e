# Supabase tables: teams, team_members
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in repository.py

"""
Expected Supabase table structure (see guild_api/database/schema.sql):

teams:
- id: bigint identity (primary key)
- event_id: bigint (foreign key to events.id, not null, on delete cascade)
- name: text (not null)
- description: text (nullable)
- day: text (not null, default: 'saturday') - values: saturday, sunday
- created_at: timestamp (default: now())

team_members:
- team_id: bigint (foreign key to teams.id, not null, on delete cascade)
- user_id: bigint (foreign key to users.id, not null, on delete cascade)
- assigned_at: timestamp (default: now())
- primary key (team_id, user_id)
"""
