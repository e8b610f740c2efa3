from fastapi import APIRouter, Depends
from app.modules.tags.schemas import TagCreate, TagUpdate, TagResponse
from app.modules.tags.service import TagService
from app.core.dependencies import get_request_supabase, require_admin
from supabase import Client
from typing import List, Dict

router = APIRouter(prefix="/tags", tags=["tags"])


def get_tag_service(supabase: Client = Depends(get_request_supabase)) -> TagService:
    return TagService(supabase)


@router.get("", response_model=List[TagResponse])
async def list_tags(service: TagService = Depends(get_tag_service)):
    """All tags ordered by name"""
    return service.list_tags()


@router.post("", response_model=TagResponse, status_code=201)
async def create_tag(
    tag_data: TagCreate,
    user_data: Dict = Depends(require_admin),
    service: TagService = Depends(get_tag_service),
):
    """Create a tag; a blank slug is generated from the name"""
    return service.create_tag(tag_data)


@router.put("/{tag_id}", response_model=TagResponse)
async def update_tag(
    tag_id: str,
    tag_data: TagUpdate,
    user_data: Dict = Depends(require_admin),
    service: TagService = Depends(get_tag_service),
):
    return service.update_tag(tag_id, tag_data)


@router.delete("/{tag_id}", status_code=204)
async def delete_tag(
    tag_id: str,
    user_data: Dict = Depends(require_admin),
    service: TagService = Depends(get_tag_service),
):
    service.delete_tag(tag_id)
    return None
