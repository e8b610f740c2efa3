from fastapi import APIRouter, Depends, HTTPException, status
from app.database.supabase_client import get_supabase_admin
from app.modules.users.schemas import UserWithRolesResponse, UserRolesUpdate, UserRolesResponse
from app.modules.users.service import UserService
from app.core.dependencies import get_request_supabase, require_admin
from supabase import Client
from typing import List, Optional, Dict

router = APIRouter(prefix="/users", tags=["users"])


def get_user_service(
    supabase: Client = Depends(get_request_supabase),
    admin_client: Optional[Client] = Depends(get_supabase_admin),
) -> UserService:
    return UserService(supabase, admin_client)


@router.get("", response_model=List[UserWithRolesResponse])
async def list_users(
    search: Optional[str] = None,
    user_data: Dict = Depends(require_admin),
    service: UserService = Depends(get_user_service),
):
    """All users with their roles; `search` matches name, username, email or phone"""
    return service.list_users(search=search)


@router.get("/{user_id}/roles", response_model=UserRolesResponse)
async def get_user_roles(
    user_id: str,
    user_data: Dict = Depends(require_admin),
    service: UserService = Depends(get_user_service),
):
    return service.get_roles(user_id)


@router.put("/{user_id}/roles", response_model=UserRolesResponse)
async def set_user_roles(
    user_id: str,
    body: UserRolesUpdate,
    user_data: Dict = Depends(require_admin),
    service: UserService = Depends(get_user_service),
):
    """Replace a user's roles (admins cannot drop their own admin role)"""
    if user_id == user_data["id"] and "admin" not in body.roles:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="You cannot remove your own admin role")
    return service.set_roles(user_id, body.roles)
