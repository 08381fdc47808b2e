def test_root_and_probes(client):
    assert client.get("/").json() == {"message": "Guild API", "status": "ok"}
    assert client.get("/health").json() == {"status": "healthy"}
    assert client.get("/ready").json() == {"status": "ready"}


def test_security_headers(client):
    response = client.get("/health")
    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"


def test_malformed_body_is_a_400(client):
    response = client.post("/auth/login", content="{not json", headers={"Content-Type": "application/json"})
    assert response.status_code == 400
    assert response.json()["code"] == "validation_error"


def test_error_body_shape(client):
    response = client.get("/events/current/xx")
    assert response.status_code == 400
    assert response.json() == {"error": "Region must be 'vn' or 'na'", "code": "validation_error"}


def test_uvicorn_app_path_resolves():
    from uvicorn.importer import import_from_string

    from guild_api.main import app

    assert import_from_string("guild_api.main:app") is app
