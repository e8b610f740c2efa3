from supabase import create_client, Client, ClientOptions
from app.config import settings
from typing import Optional


def _stateless_options(headers: Optional[dict] = None) -> ClientOptions:
    """Options for clients that must never hold or refresh a sign-in session"""
    options = ClientOptions(auto_refresh_token=False, persist_session=False)
    if headers:
        options.headers.update(headers)
    return options


class SupabaseClient:
    _client: Client = None
    _service_client: Client = None

    @classmethod
    def get_client(cls) -> Client:
        """Shared anon client. Never signs in, so its Authorization header stays the anon key."""
        if cls._client is None:
            cls._client = create_client(
                settings.supabase_url, settings.supabase_key, options=_stateless_options()
            )
        return cls._client

    @classmethod
    def get_service_client(cls) -> Client:
        """Client with service_role key; bypasses RLS and can call auth.admin."""
        if cls._service_client is None and settings.supabase_service_role_key:
            cls._service_client = create_client(
                settings.supabase_url,
                settings.supabase_service_role_key,
                options=_stateless_options(),
            )
        return cls._service_client or cls.get_client()


def get_supabase() -> Client:
    return SupabaseClient.get_client()


def get_supabase_admin() -> Optional[Client]:
    """Service-role client, or None when no service_role key is configured."""
    if not settings.supabase_service_role_key:
        return None
    return SupabaseClient.get_service_client()


def create_user_client(access_token: str) -> Client:
    """Fresh anon-key client whose database and storage calls run as the token's user (RLS applies)"""
    client = create_client(
        settings.supabase_url,
        settings.supabase_key,
        options=_stateless_options({"Authorization": f"Bearer {access_token}"}),
    )
    client.postgrest.auth(access_token)
    return client


def create_session_client() -> Client:
    """Throwaway client for sign-up, sign-in and sign-out, so session events stay off the shared client"""
    return create_client(settings.supabase_url, settings.supabase_key, options=_stateless_options())
