from fastapi import APIRouter, Depends
from app.modules.profiles.schemas import (
    ProfileUpdate, ProfileResponse, SavedPostCreate, SavedPostResponse
)
from app.modules.profiles.service import ProfileService
from app.core.dependencies import get_request_supabase, get_current_user_id
from supabase import Client
from typing import List, Dict

router = APIRouter(prefix="/profile", tags=["profile"])


def get_profile_service(supabase: Client = Depends(get_request_supabase)) -> ProfileService:
    return ProfileService(supabase)


@router.get("", response_model=ProfileResponse)
async def get_my_profile(
    user_data: Dict = Depends(get_current_user_id),
    service: ProfileService = Depends(get_profile_service),
):
    return service.get_profile(user_data["id"])


@router.put("", response_model=ProfileResponse)
async def update_my_profile(
    profile_data: ProfileUpdate,
    user_data: Dict = Depends(get_current_user_id),
    service: ProfileService = Depends(get_profile_service),
):
    return service.update_profile(user_data["id"], profile_data)


@router.get("/saved-posts", response_model=List[SavedPostResponse])
async def list_saved_posts(
    user_data: Dict = Depends(get_current_user_id),
    service: ProfileService = Depends(get_profile_service),
):
    return service.list_saved_posts(user_data["id"])


@router.post("/saved-posts", response_model=SavedPostResponse, status_code=201)
async def save_post(
    body: SavedPostCreate,
    user_data: Dict = Depends(get_current_user_id),
    service: ProfileService = Depends(get_profile_service),
):
    return service.save_post(user_data["id"], body.post_id)


@router.delete("/saved-posts/{saved_post_id}", status_code=204)
async def remove_saved_post(
    saved_post_id: str,
    user_data: Dict = Depends(get_current_user_id),
    service: ProfileService = Depends(get_profile_service),
):
    service.remove_saved_post(user_data["id"], saved_post_id)
    return None
