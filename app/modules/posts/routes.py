from fastapi import APIRouter, Depends, UploadFile, File, Form
from app.modules.posts.schemas import PostCreate, PostUpdate, PostResponse, PostShareResponse
from app.modules.posts.service import PostService
from app.modules.storage.service import StorageService
from app.core.dependencies import get_request_supabase, require_admin
from supabase import Client
from typing import List, Optional, Dict

router = APIRouter(prefix="/posts", tags=["posts"])


def get_post_service(supabase: Client = Depends(get_request_supabase)) -> PostService:
    return PostService(supabase, StorageService(supabase))


@router.get("", response_model=List[PostResponse])
async def list_posts(
    search: Optional[str] = None,
    limit: Optional[int] = None,
    service: PostService = Depends(get_post_service),
):
    """Published posts, newest first. `search` matches title or excerpt."""
    return service.list_published(search=search, limit=limit)


@router.get("/latest", response_model=List[PostResponse])
async def latest_posts(
    limit: int = 6,
    service: PostService = Depends(get_post_service),
):
    """Home page feed"""
    return service.list_published(limit=limit)


@router.get("/all", response_model=List[PostResponse])
async def list_all_posts(
    limit: int = 50,
    offset: int = 0,
    user_data: Dict = Depends(require_admin),
    service: PostService = Depends(get_post_service),
):
    """All posts including drafts"""
    return service.list_all(limit=limit, offset=offset)


@router.post("", response_model=PostResponse, status_code=201)
async def create_post(
    title: str = Form(...),
    content: str = Form(...),
    excerpt: Optional[str] = Form(None),
    published: bool = Form(False),
    tags: List[str] = Form([]),
    image: Optional[UploadFile] = File(None),
    user_data: Dict = Depends(require_admin),
    service: PostService = Depends(get_post_service),
):
    """Create a post; the optional image becomes its featured image."""
    post_data = PostCreate(title=title, content=content, excerpt=excerpt, published=published, tags=tags)
    featured_image = ""
    if image is not None and image.filename:
        featured_image = service.upload_featured_image(await image.read(), image.filename, image.content_type)
    return service.create_post(post_data, user_data["id"], featured_image)


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(
    post_id: str,
    service: PostService = Depends(get_post_service),
):
    return service.get_published(post_id)


@router.get("/{post_id}/share", response_model=PostShareResponse)
async def share_post(
    post_id: str,
    service: PostService = Depends(get_post_service),
):
    """Public link for sharing or copying to the clipboard"""
    return service.share_link(post_id)


@router.put("/{post_id}", response_model=PostResponse)
async def update_post(
    post_id: str,
    post_data: PostUpdate,
    user_data: Dict = Depends(require_admin),
    service: PostService = Depends(get_post_service),
):
    return service.update_post(post_id, post_data)


@router.delete("/{post_id}", status_code=204)
async def delete_post(
    post_id: str,
    user_data: Dict = Depends(require_admin),
    service: PostService = Depends(get_post_service),
):
    service.delete_post(post_id)
    return None
