"""Test the slowapi limits on public endpoints."""

import pytest

from app.config import settings
from app.core.rate_limit import limiter


def _allowed(limit: str) -> int:
    return int(limit.split("/")[0])


@pytest.fixture()
def limited_client(client):
    limiter.enabled = True
    limiter.reset()
    yield client
    limiter.reset()


def test_welcome_email_is_rate_limited(limited_client):
    for _ in range(_allowed(settings.email_rate_limit)):
        response = limited_client.post("/api/v1/emails/welcome", json={"email": "fan@example.com"})
        assert response.status_code == 200
    response = limited_client.post("/api/v1/emails/welcome", json={"email": "fan@example.com"})
    assert response.status_code == 429


def test_subscribe_is_rate_limited(limited_client):
    for i in range(_allowed(settings.email_rate_limit)):
        response = limited_client.post("/api/v1/subscribers", json={"email": f"fan{i}@example.com"})
        assert response.status_code == 201
    response = limited_client.post("/api/v1/subscribers", json={"email": "late@example.com"})
    assert response.status_code == 429


def test_limits_reset(limited_client):
    for _ in range(_allowed(settings.email_rate_limit)):
        limited_client.post("/api/v1/emails/welcome", json={"email": "fan@example.com"})
    limiter.reset()
    response = limited_client.post("/api/v1/emails/welcome", json={"email": "fan@example.com"})
    assert response.status_code == 200


def test_default_limit_applies_but_health_is_exempt(limited_client):
    allowed = _allowed(settings.rate_limit)
    for _ in range(allowed + 1):
        assert limited_client.get("/health").status_code == 200

    for _ in range(allowed):
        assert limited_client.get("/").status_code == 200
    assert limited_client.get("/").status_code == 429
