from supabase import Client
from app.core.errors import to_http_exception
from app.modules.profiles.schemas import (
    ProfileUpdate, ProfileResponse, SavedPostResponse
)
from typing import List
from fastapi import HTTPException
from datetime import datetime
import logging

logger = logging.getLogger(__name__)


class ProfileService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def get_profile(self, user_id: str) -> ProfileResponse:
        """Get profile by user ID"""
        try:
            result = self.supabase.table("profiles")\
                .select("*")\
                .eq("id", user_id)\
                .single()\
                .execute()

            if not result.data:
                raise HTTPException(status_code=404, detail="Profile not found")

            return ProfileResponse(**result.data)
        except Exception as e:
            raise to_http_exception(e, not_found="Profile not found")

    def update_profile(self, user_id: str, profile_data: ProfileUpdate) -> ProfileResponse:
        """Overwrite the editable profile fields"""
        try:
            update_data = {
                "full_name": profile_data.full_name,
                "username": profile_data.username,
                "bio": profile_data.bio,
                "phone": profile_data.phone,
                "date_of_birth": profile_data.date_of_birth.isoformat() if profile_data.date_of_birth else None,
                "updated_at": datetime.utcnow().isoformat(),
            }

            result = self.supabase.table("profiles")\
                .update(update_data)\
                .eq("id", user_id)\
                .execute()

            if not result.data:
                raise HTTPException(status_code=404, detail="Profile not found")

            return ProfileResponse(**result.data[0])
        except Exception as e:
            raise to_http_exception(e, not_found="Profile not found", conflict="Username already taken")

    def list_saved_posts(self, user_id: str) -> List[SavedPostResponse]:
        """Saved posts with a summary of each post, newest first"""
        try:
            result = self.supabase.table("saved_posts")\
                .select("*, posts (id, title, excerpt, created_at, reading_time)")\
                .eq("user_id", user_id)\
                .order("created_at", desc=True)\
                .execute()
            return [SavedPostResponse(**s) for s in result.data or []]
        except Exception as e:
            raise to_http_exception(e)

    def save_post(self, user_id: str, post_id: str) -> SavedPostResponse:
        try:
            result = self.supabase.table("saved_posts").insert({
                "user_id": user_id,
                "post_id": post_id,
            }).execute()
            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to save post")
            return SavedPostResponse(**result.data[0])
        except Exception as e:
            raise to_http_exception(e, conflict="Post already saved")

    def remove_saved_post(self, user_id: str, saved_post_id: str) -> bool:
        """Only the owner's row matches, so other users' ids are a 404"""
        try:
            result = self.supabase.table("saved_posts")\
                .delete()\
                .eq("id", saved_post_id)\
                .eq("user_id", user_id)\
                .execute()
            if not result.data:
                raise HTTPException(status_code=404, detail="Saved post not found")
            return True
        except Exception as e:
            raise to_http_exception(e, not_found="Saved post not found")
