from supabase import Client
from app.core.errors import to_http_exception
from app.modules.comments.schemas import CommentCreate, CommentResponse
from typing import List
from fastapi import HTTPException


class CommentService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def list_comments(self, post_id: str) -> List[CommentResponse]:
        """Comments of a post, oldest first"""
        try:
            result = self.supabase.table("comments")\
                .select("*")\
                .eq("post_id", post_id)\
                .order("created_at")\
                .execute()
            return [CommentResponse(**c) for c in result.data or []]
        except Exception as e:
            raise to_http_exception(e)

    def create_comment(self, post_id: str, comment_data: CommentCreate, user_id: str) -> CommentResponse:
        try:
            result = self.supabase.table("comments").insert({
                "post_id": post_id,
                "user_id": user_id,
                "content": comment_data.content,
            }).execute()
            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to create comment")
            return CommentResponse(**result.data[0])
        except Exception as e:
            raise to_http_exception(e)

    def get_comment(self, comment_id: str) -> CommentResponse:
        try:
            result = self.supabase.table("comments")\
                .select("*")\
                .eq("id", comment_id)\
                .single()\
                .execute()
            if not result.data:
                raise HTTPException(status_code=404, detail="Comment not found")
            return CommentResponse(**result.data)
        except Exception as e:
            raise to_http_exception(e, not_found="Comment not found")

    def delete_comment(self, comment_id: str) -> bool:
        try:
            result = self.supabase.table("comments")\
                .delete()\
                .eq("id", comment_id)\
                .execute()
            return len(result.data) > 0
        except Exception as e:
            raise to_http_exception(e)
