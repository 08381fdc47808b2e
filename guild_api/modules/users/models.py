# Supabase table: users
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in repository.py

"""
Expected Supabase table structure (see guild_api/database/schema.sql):

users:
- id: bigint identity (primary key)
- username: text (unique, not null) - in-game name
- discord_id: text (unique, nullable)
- password: text (nullable) - SHA-256 hex digest, only set for admins
- is_admin: boolean (default: false)
- primary_class: jsonb (array of exactly 2 class tags)
- secondary_class: jsonb (nullable, array of exactly 2 class tags)
- primary_role: text - values: dps, healer, tank
- secondary_role: text (nullable) - values: dps, healer, tank
- region: text (not null) - values: vn, na
- created_at: timestamp (default: now())

Note: the password column is never returned by any read projection.
"""
