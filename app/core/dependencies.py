"""
Core dependencies for route protection and role checking
"""

from fastapi import Depends, HTTPException, Request, Security, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from app.database.supabase_client import get_supabase, create_user_client, create_session_client
from app.modules.auth.service import AuthService
from supabase import Client
from typing import Callable, Optional
import logging

logger = logging.getLogger(__name__)

security = HTTPBearer()
optional_security = HTTPBearer(auto_error=False)


def get_user_client_factory() -> Callable[[str], Client]:
    return create_user_client


def get_session_client_factory() -> Callable[[], Client]:
    return create_session_client


def get_request_supabase(
    credentials: Optional[HTTPAuthorizationCredentials] = Security(optional_security),
    supabase: Client = Depends(get_supabase),
    client_for_token: Callable[[str], Client] = Depends(get_user_client_factory),
) -> Client:
    """Client acting as the caller when a bearer token is sent, the shared anon client otherwise.

    Built once per request, so every service in the request shares it and RLS
    sees the caller's own JWT.
    """
    if credentials is None:
        return supabase
    return client_for_token(credentials.credentials)


def get_auth_service(
    supabase: Client = Depends(get_request_supabase),
    session_client: Callable[[], Client] = Depends(get_session_client_factory),
) -> AuthService:
    return AuthService(supabase, session_client)


def get_current_user_id(
    credentials: HTTPAuthorizationCredentials = Security(security),
    auth_service: AuthService = Depends(get_auth_service)
) -> dict:
    """Extract current user info from JWT token"""
    token = credentials.credentials
    return auth_service.get_current_user(token)


def _is_admin_cached(request: Request, user_id: str, auth_service: AuthService) -> bool:
    """Admin flag memoised on request.state so nested checks hit user_roles once."""
    cache = getattr(request.state, "admin_cache", None)
    if cache is None:
        cache = {}
        request.state.admin_cache = cache
    if user_id not in cache:
        cache[user_id] = auth_service.is_admin(user_id)
    return cache[user_id]


def require_admin(
    request: Request,
    user_data: dict = Depends(get_current_user_id),
    auth_service: AuthService = Depends(get_auth_service)
) -> dict:
    """Dependency that rejects users without an 'admin' row in user_roles"""
    if not _is_admin_cached(request, user_data["id"], auth_service):
        logger.info(f"Admin access denied for user {user_data['id']}")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin role required"
        )
    return user_data


def is_admin_user(
    request: Request,
    user_data: dict,
    auth_service: AuthService
) -> bool:
    return _is_admin_cached(request, user_data["id"], auth_service)
