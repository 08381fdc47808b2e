# Supabase tables: events, event_signups
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in repository.py and signups_repository.py

"""
Expected Supabase table structure (see guild_api/database/schema.sql):

events:
- id: bigint identity (primary key)
- region: text (not null) - values: vn, na
- week_start_date: timestamp (not null) - Monday 00:00 UTC for weekly events,
  creation instant for manually created ones
- created_at: timestamp (default: now())
- unique index on (region, week_start_date)

event_signups:
- event_id: bigint (foreign key to events.id, not null, on delete cascade)
- user_id: bigint (foreign key to users.id, not null, on delete cascade)
- time_slots: jsonb (non-empty array of time slot strings)
- notes: text (nullable)
- signed_up_at: timestamp (default: now())
- primary key (event_id, user_id)
"""
