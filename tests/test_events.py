from datetime import datetime, timedelta, timezone

import pytest
from postgrest.exceptions import APIError

from guild_api.modules.events.service import current_week_start
from tests.conftest import bearer, make_member

WEDNESDAY = datetime(2026, 10, 14, 15, 30, tzinfo=timezone.utc)
MONDAY = datetime(2026, 10, 12, tzinfo=timezone.utc)


@pytest.mark.parametrize("now", [
    datetime(2026, 10, 12, 0, 0, tzinfo=timezone.utc),
    WEDNESDAY,
    datetime(2026, 10, 18, 23, 59, 59, tzinfo=timezone.utc),
])
def test_current_week_start_is_monday_midnight_utc(now):
    assert current_week_start(now) == MONDAY


def test_current_week_start_converts_to_utc():
    # Monday 01:00 at UTC+7 is still Sunday in UTC
    local = datetime(2026, 10, 19, 1, 0, tzinfo=timezone(timedelta(hours=7)))
    assert current_week_start(local) == MONDAY


def test_create_event_seeds_default_teams(db, events_service):
    event = events_service.create_event("vn")
    teams = [t for t in db.rows("teams") if t["event_id"] == event.id]
    assert [(t["name"], t["day"]) for t in teams] == [
        ("Team Top", "saturday"), ("Team Mid", "saturday"), ("Team Bot", "saturday"),
        ("Team Top", "sunday"), ("Team Mid", "sunday"), ("Team Bot", "sunday"),
    ]
    assert teams[0]["description"] == "Top lane team"


def test_weekly_event_is_created_once_per_week(db, events_service):
    first = events_service.create_weekly_event("vn", now=WEDNESDAY)
    second = events_service.create_weekly_event("vn", now=datetime(2026, 10, 17, tzinfo=timezone.utc))
    assert first.created is True
    assert second.created is False
    assert second.event.id == first.event.id
    assert first.event.week_start_date == MONDAY
    assert len(db.rows("events")) == 1
    assert len(db.rows("teams")) == 6


def test_weekly_event_per_region_and_week(db, events_service):
    events_service.create_weekly_event("vn", now=WEDNESDAY)
    assert events_service.create_weekly_event("na", now=WEDNESDAY).created is True
    assert events_service.create_weekly_event("vn", now=datetime(2026, 10, 20, tzinfo=timezone.utc)).created is True
    assert len(db.rows("events")) == 3


def test_weekly_event_lost_race_returns_winner(db, events_service, monkeypatch):
    winner = db.insert_row("events", {"region": "vn", "week_start_date": MONDAY.isoformat()})
    real_lookup = events_service.events.find_by_region_and_week
    calls = []

    def lookup(region, week_start_date):
        # First lookup misses, as if the other writer committed right after it
        calls.append(region)
        if len(calls) == 1:
            return None
        return real_lookup(region, week_start_date)

    monkeypatch.setattr(events_service.events, "find_by_region_and_week", lookup)

    result = events_service.create_weekly_event("vn", now=WEDNESDAY)
    assert result.created is False
    assert result.event.id == winner["id"]
    assert len(calls) == 2
    assert len(db.rows("events")) == 1
    assert db.rows("teams") == []


def test_failed_team_seed_removes_event(db, events_service):
    db.fail_next_insert("teams", APIError({"message": "boom", "code": "XX000", "details": None, "hint": None}))
    with pytest.raises(APIError):
        events_service.create_weekly_event("vn", now=WEDNESDAY)
    assert db.rows("events") == []
    assert db.rows("teams") == []

    assert events_service.create_weekly_event("vn", now=WEDNESDAY).created is True


def test_create_endpoint(client, db, vn_headers):
    response = client.post("/events/create", headers=vn_headers)
    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Event created successfully"
    assert body["event"]["region"] == "vn"
    assert len(db.rows("teams")) == 6


def test_create_endpoint_requires_admin(client, db):
    member = make_member(db, "Kaito", "vn")
    assert client.post("/events/create").status_code == 401
    response = client.post("/events/create", headers=bearer(member))
    assert response.status_code == 403
    assert response.json()["code"] == "admin_required"


def test_create_weekly_endpoint(client, vn_headers):
    first = client.post("/events/create-weekly", headers=vn_headers)
    assert first.status_code == 201
    assert first.json()["message"] == "Weekly event created"

    second = client.post("/events/create-weekly", headers=vn_headers)
    assert second.status_code == 200
    assert second.json()["message"] == "Event already exists for this week"
    assert second.json()["event"]["id"] == first.json()["event"]["id"]


def test_auto_create_weekly_covers_every_region(client, db):
    first = client.post("/events/auto-create-weekly")
    assert first.status_code == 200
    body = first.json()
    assert body["vn"]["created"] is True
    assert body["na"]["created"] is True
    assert body["na"]["event"]["region"] == "na"

    second = client.post("/events/auto-create-weekly").json()
    assert second["vn"]["created"] is False
    assert second["vn"]["event"]["id"] == body["vn"]["event"]["id"]
    assert len(db.rows("events")) == 2


def test_auto_create_weekly_failure(client, db, monkeypatch):
    def explode(supabase):
        raise RuntimeError("database unavailable")

    monkeypatch.setattr("guild_api.modules.events.routes.auto_create_weekly_events", explode)
    response = client.post("/events/auto-create-weekly")
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to create weekly events"}


def test_current_event_for_region(client, db, events_service, signup_body):
    assert client.get("/events/current/na").status_code == 404
    assert client.get("/events/current/eu").status_code == 400

    events_service.create_event("vn")
    latest = events_service.create_event("vn")
    client.post("/auth/signup", json=signup_body)

    response = client.get("/events/current/vn")
    assert response.status_code == 200
    body = response.json()
    assert body["id"] == latest.id
    assert len(body["teams"]) == 6
    assert body["teams"][0]["members"] == []
    assert body["signups"][0]["user"]["username"] == "Kaito"
    assert body["signups"][0]["timeSlots"] == ["19:00-21:00"]


def test_current_event_of_caller_region(client, vn_headers, na_headers, vn_event):
    assert client.get("/events/current", headers=vn_headers).json()["id"] == vn_event.id
    response = client.get("/events/current", headers=na_headers)
    assert response.status_code == 404
    assert response.json()["code"] == "no_event_for_region"


def test_list_events_scoped_to_region(client, vn_headers, vn_event, na_event):
    own = client.get("/events", headers=vn_headers).json()
    assert [e["id"] for e in own] == [vn_event.id]
    assert len(own[0]["teams"]) == 6

    other = client.get("/events", params={"region": "na"}, headers=vn_headers).json()
    assert [e["id"] for e in other] == [na_event.id]

    assert client.get("/events", params={"region": "eu"}, headers=vn_headers).status_code == 400


def test_get_event_by_id(client, vn_headers, vn_event):
    response = client.get(f"/events/{vn_event.id}", headers=vn_headers)
    assert response.status_code == 200
    assert response.json()["weekStartDate"]
    assert client.get("/events/999", headers=vn_headers).status_code == 404
    assert client.get(f"/events/{vn_event.id}").status_code == 401
