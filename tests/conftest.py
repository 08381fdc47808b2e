import pytest
from fastapi.testclient import TestClient

from guild_api.core.rate_limit import limiter
from guild_api.core.security import generate_token, hash_password
from guild_api.database.supabase_client import get_supabase
from guild_api.main import app
from guild_api.modules.events.repository import EventsRepository
from guild_api.modules.events.service import EventsService
from guild_api.modules.teams.repository import TeamsRepository
from tests.fake_supabase import FakeSupabase

ADMIN_PASSWORD = "admin123@"


@pytest.fixture
def db():
    return FakeSupabase()


@pytest.fixture
def client(db):
    limiter.enabled = False
    app.dependency_overrides[get_supabase] = lambda: db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
        limiter.enabled = True


@pytest.fixture
def events_service(db):
    return EventsService(EventsRepository(db), TeamsRepository(db))


def make_admin(db, username, region):
    return db.insert_row("users", {
        "username": username,
        "password": hash_password(ADMIN_PASSWORD),
        "is_admin": True,
        "region": region,
    })


def make_member(db, username, region, **fields):
    row = {
        "username": username,
        "region": region,
        "primary_class": ["strategicSword", "namelessSword"],
        "primary_role": "dps",
    }
    row.update(fields)
    return db.insert_row("users", row)


def bearer(user):
    return {"Authorization": f"Bearer {generate_token(user)}"}


@pytest.fixture
def admin_vn(db):
    return make_admin(db, "adminvn", "vn")


@pytest.fixture
def admin_na(db):
    return make_admin(db, "adminna", "na")


@pytest.fixture
def vn_headers(admin_vn):
    return bearer(admin_vn)


@pytest.fixture
def na_headers(admin_na):
    return bearer(admin_na)


@pytest.fixture
def vn_event(events_service):
    return events_service.create_event("vn")


@pytest.fixture
def na_event(events_service):
    return events_service.create_event("na")


@pytest.fixture
def signup_body():
    return {
        "username": "Kaito",
        "primaryClass": ["strategicSword", "namelessSword"],
        "primaryRole": "dps",
        "region": "vn",
        "timeSlots": ["19:00-21:00"],
    }
