from guild_api.core.security import verify_password
from guild_api.modules.events.weekly_scheduler import auto_create_weekly_events
from guild_api.scripts.seed_admins import seed_admins


def test_seed_admins_creates_missing_accounts(db):
    assert seed_admins(db, "s3cret") == 2
    admins = {u["username"]: u for u in db.rows("users")}
    assert admins["adminvn"]["region"] == "vn"
    assert admins["adminna"]["is_admin"] is True
    assert verify_password("s3cret", admins["adminna"]["password"])

    assert seed_admins(db, "other") == 0
    assert len(db.rows("users")) == 2


def test_seeded_admin_can_log_in(client, db):
    seed_admins(db, "s3cret")
    response = client.post("/auth/login", json={"username": "adminna", "password": "s3cret"})
    assert response.status_code == 200
    assert response.json()["user"]["region"] == "na"


def test_weekly_job_is_idempotent(db):
    first = auto_create_weekly_events(db)
    second = auto_create_weekly_events(db)
    assert first.vn.created and first.na.created
    assert not second.vn.created and not second.na.created
    assert second.na.event.id == first.na.event.id
    assert len(db.rows("teams")) == 12
