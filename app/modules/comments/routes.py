from fastapi import APIRouter, Depends, HTTPException, Request, status
from app.modules.auth.service import AuthService
from app.modules.comments.schemas import CommentCreate, CommentResponse
from app.modules.comments.service import CommentService
from app.core.dependencies import get_request_supabase, get_auth_service, get_current_user_id, is_admin_user
from supabase import Client
from typing import List, Dict

router = APIRouter(tags=["comments"])


def get_comment_service(supabase: Client = Depends(get_request_supabase)) -> CommentService:
    return CommentService(supabase)


@router.get("/posts/{post_id}/comments", response_model=List[CommentResponse])
async def list_comments(
    post_id: str,
    service: CommentService = Depends(get_comment_service),
):
    return service.list_comments(post_id)


@router.post("/posts/{post_id}/comments", response_model=CommentResponse, status_code=201)
async def create_comment(
    post_id: str,
    comment_data: CommentCreate,
    user_data: Dict = Depends(get_current_user_id),
    service: CommentService = Depends(get_comment_service),
):
    return service.create_comment(post_id, comment_data, user_data["id"])


@router.delete("/comments/{comment_id}", status_code=204)
async def delete_comment(
    comment_id: str,
    request: Request,
    user_data: Dict = Depends(get_current_user_id),
    auth_service: AuthService = Depends(get_auth_service),
    service: CommentService = Depends(get_comment_service),
):
    """Authors delete their own comments; admins delete any"""
    comment = service.get_comment(comment_id)
    if comment.user_id != user_data["id"] and not is_admin_user(request, user_data, auth_service):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not your comment")
    service.delete_comment(comment_id)
    return None
