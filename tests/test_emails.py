"""Test the welcome email rendering and Resend integration."""

import pytest
import resend
from fastapi import HTTPException

from app.modules.emails.service import EmailService
from app.modules.emails.templates import WELCOME_SUBJECT, render_welcome_email


def test_render_uses_name():
    html = render_welcome_email("Minh")
    assert "Hi Minh," in html
    assert "Cảm ơn Minh" in html
    assert "Thank you Minh" in html


def test_render_falls_back_per_language():
    html = render_welcome_email(None)
    assert "Hi bạn," in html
    assert "Thank you friend" in html


def test_render_escapes_name():
    html = render_welcome_email("<script>")
    assert "<script>" not in html
    assert "&lt;script&gt;" in html


def test_send_welcome_email(monkeypatch):
    captured = {}

    def fake_send(params):
        captured.update(params)
        return {"id": "re_123"}

    monkeypatch.setattr(resend.Emails, "send", fake_send)
    service = EmailService(api_key="re_test", sender="Deus <hello@example.com>")
    assert service.send_welcome_email("fan@example.com", "Minh") == {"id": "re_123"}
    assert captured["to"] == ["fan@example.com"]
    assert captured["from"] == "Deus <hello@example.com>"
    assert captured["subject"] == WELCOME_SUBJECT


def test_send_propagates_sdk_error(monkeypatch):
    def failing_send(params):
        raise RuntimeError("domain not verified")

    monkeypatch.setattr(resend.Emails, "send", failing_send)
    with pytest.raises(HTTPException) as exc_info:
        EmailService(api_key="re_test").send_welcome_email("fan@example.com")
    assert exc_info.value.status_code == 500
    assert exc_info.value.detail == "domain not verified"


def test_send_without_api_key():
    with pytest.raises(HTTPException) as exc_info:
        EmailService(api_key="").send_welcome_email("fan@example.com")
    assert exc_info.value.status_code == 500


def test_welcome_endpoint(client, email_service):
    response = client.post("/api/v1/emails/welcome", json={"email": "fan@example.com", "name": "An"})
    assert response.status_code == 200
    assert response.json() == {"id": "email-1"}
    assert email_service.sent == [{"email": "fan@example.com", "name": "An"}]


def test_welcome_endpoint_reports_failure(client, email_service):
    email_service.fail_with = HTTPException(status_code=500, detail="bad key")
    response = client.post("/api/v1/emails/welcome", json={"email": "fan@example.com"})
    assert response.status_code == 500
    assert response.json() == {"detail": "bad key"}
