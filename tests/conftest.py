from __future__ import annotations

from typing import Dict, Generator

import pytest
from fastapi.testclient import TestClient

from app.core.dependencies import get_session_client_factory, get_user_client_factory
from app.core.rate_limit import limiter
from app.database.supabase_client import get_supabase, get_supabase_admin
from app.main import app
from app.modules.auth.service import clear_auth_cache
from app.modules.emails.routes import get_email_service
from tests.fakes import ADMIN_ID, READER_ID, FakeSupabase, RecordingEmailService


@pytest.fixture()
def fake_supabase() -> FakeSupabase:
    fake = FakeSupabase()
    fake.auth.add_user(ADMIN_ID, "admin@example.com", "secret", token="admin-token",
                       user_metadata={"full_name": "Site Admin"})
    fake.auth.add_user(READER_ID, "reader@example.com", "secret", token="reader-token")
    fake.seed("user_roles", {"user_id": ADMIN_ID, "role": "admin"}, {"user_id": ADMIN_ID, "role": "user"})
    fake.seed("user_roles", {"user_id": READER_ID, "role": "user"})
    fake.seed("profiles",
              {"id": ADMIN_ID, "full_name": "John Deus", "username": "johndeus", "phone": "0901234567"},
              {"id": READER_ID, "full_name": "Lan Nguyen", "username": "lan", "phone": None})
    return fake


@pytest.fixture()
def email_service() -> RecordingEmailService:
    return RecordingEmailService()


@pytest.fixture()
def client(fake_supabase: FakeSupabase, email_service: RecordingEmailService) -> Generator[TestClient, None, None]:
    clear_auth_cache()
    limiter.enabled = False
    app.dependency_overrides[get_supabase] = lambda: fake_supabase
    app.dependency_overrides[get_supabase_admin] = lambda: fake_supabase
    app.dependency_overrides[get_user_client_factory] = lambda: fake_supabase.for_token
    app.dependency_overrides[get_session_client_factory] = lambda: fake_supabase.session_client
    app.dependency_overrides[get_email_service] = lambda: email_service
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
        limiter.enabled = True
        clear_auth_cache()


@pytest.fixture()
def admin_headers() -> Dict[str, str]:
    return {"Authorization": "Bearer admin-token"}


@pytest.fixture()
def reader_headers() -> Dict[str, str]:
    return {"Authorization": "Bearer reader-token"}
