"""Test authentication and role resolution."""

from tests.fakes import ADMIN_ID, READER_ID


def test_register_and_login(client, fake_supabase):
    response = client.post("/api/v1/auth/register", json={
        "email": "new@example.com",
        "password": "pa55word",
        "full_name": "New Reader",
    })
    assert response.status_code == 201
    user_id = response.json()["user_id"]
    assert fake_supabase.auth.users[user_id]["user_metadata"] == {"full_name": "New Reader"}

    response = client.post("/api/v1/auth/login", json={"email": "new@example.com", "password": "pa55word"})
    assert response.status_code == 200
    body = response.json()
    assert body["user_id"] == user_id
    assert body["token_type"] == "bearer"


def test_register_existing_email_is_rejected(client):
    response = client.post("/api/v1/auth/register", json={"email": "reader@example.com", "password": "x"})
    assert response.status_code == 400
    assert response.json()["detail"] == "User already exists"


def test_login_with_wrong_password(client):
    response = client.post("/api/v1/auth/login", json={"email": "reader@example.com", "password": "nope"})
    assert response.status_code == 401


def test_me_reports_admin_role(client, admin_headers):
    response = client.get("/api/v1/auth/me", headers=admin_headers)
    assert response.status_code == 200
    body = response.json()
    assert body["id"] == ADMIN_ID
    assert body["is_admin"] is True
    assert sorted(body["roles"]) == ["admin", "user"]


def test_me_for_reader(client, reader_headers):
    body = client.get("/api/v1/auth/me", headers=reader_headers).json()
    assert body["id"] == READER_ID
    assert body["is_admin"] is False


def test_invalid_token_is_unauthorized(client):
    response = client.get("/api/v1/auth/me", headers={"Authorization": "Bearer bogus"})
    assert response.status_code == 401


def test_missing_token_is_rejected(client):
    response = client.get("/api/v1/auth/me")
    assert response.status_code in (401, 403)


def test_token_lookups_are_cached(client, fake_supabase, reader_headers):
    client.get("/api/v1/auth/me", headers=reader_headers)
    client.get("/api/v1/auth/me", headers=reader_headers)
    assert fake_supabase.auth.count("get_user") == 1


def test_logout(client, fake_supabase, reader_headers):
    response = client.post("/api/v1/auth/logout", headers=reader_headers)
    assert response.status_code == 200
    assert fake_supabase.auth.count("sign_out", owner="session") == 1
    assert fake_supabase.auth.revoked == ["reader-token"]


def test_admin_route_forbidden_for_reader(client, reader_headers):
    response = client.post("/api/v1/tags", json={"name": "Python"}, headers=reader_headers)
    assert response.status_code == 403


def test_sign_in_and_sign_up_never_touch_the_shared_client(client, fake_supabase):
    client.post("/api/v1/auth/register", json={"email": "new@example.com", "password": "pa55word"})
    client.post("/api/v1/auth/login", json={"email": "reader@example.com", "password": "secret"})
    assert fake_supabase.auth.count("sign_up", owner="session") == 1
    assert fake_supabase.auth.count("sign_in", owner="session") == 1
    assert fake_supabase.auth.count("sign_up", owner="shared") == 0
    assert fake_supabase.auth.count("sign_in", owner="shared") == 0
    assert len(fake_supabase.session_clients) == 2
