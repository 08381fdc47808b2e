"""
Seed Admin Users Script
Creates one admin account per region (adminvn, adminna) when missing.
Run with: python -m guild_api.scripts.seed_admins
"""

import sys
import logging
from supabase import Client

from guild_api.config import settings
from guild_api.core.security import hash_password
from guild_api.database.supabase_client import SupabaseClient
from guild_api.modules.users.repository import UsersRepository

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

ADMIN_ACCOUNTS = [
    {"username": "adminvn", "region": "vn"},
    {"username": "adminna", "region": "na"},
]


def seed_admins(supabase: Client, password: str) -> int:
    """Create missing admin accounts; existing ones are left untouched"""
    users = UsersRepository(supabase)
    hashed_password = hash_password(password)
    created_count = 0

    for admin in ADMIN_ACCOUNTS:
        if users.find_by_username(admin["username"]):
            logger.info(f"Admin user already exists: {admin['username']}")
            continue
        users.create({
            "username": admin["username"],
            "password": hashed_password,
            "is_admin": True,
            "region": admin["region"],
        })
        created_count += 1
        logger.info(f"Created admin user: {admin['username']}")

    return created_count


def main():
    try:
        supabase = SupabaseClient.get_service_client()
        created = seed_admins(supabase, settings.admin_seed_password)
        logger.info(f"Seeding completed: {created} admin user(s) created")
    except Exception as e:
        logger.error(f"Error during seeding: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
