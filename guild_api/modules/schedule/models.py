# Supabase table: scheduled_notifications
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in repository.py

"""
Expected Supabase table structure (see guild_api/database/schema.sql):

scheduled_notifications:
- id: bigint identity (primary key)
- title: text (not null)
- days: jsonb (nullable) - array of day names, e.g. ["saturday", "sunday"]
- region: text (not null) - values: vn, na
- start_time: text (not null) - "HH:MM"
- end_time: text (not null) - "HH:MM"
- minutes_before: integer (not null, default: 15) - lead time of the reminder
- role_mention: text (nullable) - role to ping
- channel_id: text (not null) - where the external notifier posts
- enabled: boolean (default: true)
- created_at: timestamp (default: now())

Read by an external notifier; nothing in this service acts on it.
"""
