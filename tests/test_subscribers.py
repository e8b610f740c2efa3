"""Test the mailing list sign-up."""

from fastapi import HTTPException


def test_subscribe_sends_welcome_email(client, fake_supabase, email_service):
    response = client.post("/api/v1/subscribers", json={"email": "fan@example.com", "name": "Minh"})
    assert response.status_code == 201
    body = response.json()
    assert body["welcome_email_sent"] is True
    assert body["subscriber"]["email"] == "fan@example.com"
    assert email_service.sent == [{"email": "fan@example.com", "name": "Minh"}]
    assert len(fake_supabase.tables["email_subscribers"]) == 1


def test_duplicate_email_is_conflict(client, fake_supabase, email_service):
    fake_supabase.seed("email_subscribers", {"email": "fan@example.com", "name": "Old"})
    response = client.post("/api/v1/subscribers", json={"email": "fan@example.com", "name": "Minh"})
    assert response.status_code == 409
    assert response.json()["detail"] == "This email is already on our subscriber list"
    assert email_service.sent == []


def test_email_failure_does_not_fail_subscription(client, fake_supabase, email_service):
    email_service.fail_with = HTTPException(status_code=500, detail="resend down")
    response = client.post("/api/v1/subscribers", json={"email": "fan@example.com"})
    assert response.status_code == 201
    assert response.json()["welcome_email_sent"] is False
    assert len(fake_supabase.tables["email_subscribers"]) == 1


def test_invalid_email_rejected(client):
    assert client.post("/api/v1/subscribers", json={"email": "not-an-email"}).status_code == 422


def test_other_database_errors_propagate(client, fake_supabase):
    fake_supabase.fail("email_subscribers", "insert", code="42501", message="permission denied")
    response = client.post("/api/v1/subscribers", json={"email": "fan@example.com"})
    assert response.status_code == 500
    assert response.json()["detail"] == "permission denied"


def test_list_subscribers_is_admin_only(client, fake_supabase, admin_headers, reader_headers):
    fake_supabase.seed("email_subscribers", {"email": "a@example.com"}, {"email": "b@example.com"})
    assert client.get("/api/v1/subscribers", headers=reader_headers).status_code == 403
    emails = [s["email"] for s in client.get("/api/v1/subscribers", headers=admin_headers).json()]
    assert emails == ["b@example.com", "a@example.com"]
