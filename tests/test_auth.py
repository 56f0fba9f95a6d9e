from conftest import OWNER_ID, user_headers


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_me_without_identity_is_null(client):
    resp = client.get("/auth/me")
    assert resp.status_code == 200
    assert resp.json() is None


def test_first_request_creates_customer(client):
    resp = client.get("/auth/me", headers=user_headers("u-1", name="Ann", email="ann@example.com"))
    assert resp.status_code == 200
    body = resp.json()
    assert body["id"] == "u-1"
    assert body["name"] == "Ann"
    assert body["email"] == "ann@example.com"
    assert body["role"] == "user"
    assert body["user_type"] == "customer"
    assert body["is_approved_trainer"] is False


def test_owner_becomes_admin(client):
    body = client.get("/auth/me", headers=user_headers(OWNER_ID)).json()
    assert body["role"] == "admin"


def test_identity_headers_refresh_user(client):
    client.get("/auth/me", headers=user_headers("u-2", name="Old"))
    body = client.get("/auth/me", headers=user_headers("u-2", name="New")).json()
    assert body["name"] == "New"

    # missing headers do not wipe stored values
    body = client.get("/auth/me", headers=user_headers("u-2")).json()
    assert body["name"] == "New"


def test_protected_endpoint_requires_identity(client):
    resp = client.post("/consultations", json={"title": "t", "description": "d"})
    assert resp.status_code == 401
    assert resp.json()["detail"] == "X-User-Id header required"


def test_logout(client):
    resp = client.post("/auth/logout")
    assert resp.status_code == 200
    assert resp.json() == {"success": True}


def test_metrics_exposed(client):
    client.get("/health")
    resp = client.get("/metrics")
    assert resp.status_code == 200
    assert "consultations_created_total" in resp.text


def test_concurrent_first_request_reuses_inserted_user(client, db_session, monkeypatch):
    from consultations_service.models import User
    from consultations_service.repositories.users_repository import user_repository

    assert client.get("/auth/me", headers=user_headers("u-race", name="First")).status_code == 200

    # the lookup misses as if another request inserted the row right after it
    monkeypatch.setattr(user_repository, "get", lambda db, id: None)
    resp = client.get("/auth/me", headers=user_headers("u-race", name="Second"))

    assert resp.status_code == 200
    assert resp.json()["id"] == "u-race"
    assert resp.json()["name"] == "Second"
    assert db_session.query(User).filter(User.id == "u-race").count() == 1
