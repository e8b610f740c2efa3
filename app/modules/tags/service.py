import re
from supabase import Client
from app.core.errors import to_http_exception
from app.modules.tags.schemas import TagCreate, TagUpdate, TagResponse
from typing import List
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)

TAG_EXISTS = "A tag with this name or slug already exists"


def generate_slug(name: str) -> str:
    """Lowercase, whitespace runs to '-', then drop anything outside [a-z0-9-]"""
    slug = re.sub(r"\s+", "-", name.lower())
    return re.sub(r"[^a-z0-9-]", "", slug)


class TagService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def _row(self, tag_data: TagCreate) -> dict:
        return {
            "name": tag_data.name,
            "slug": tag_data.slug or generate_slug(tag_data.name),
            "description": tag_data.description,
            "color": tag_data.color,
        }

    def list_tags(self) -> List[TagResponse]:
        try:
            result = self.supabase.table("tags")\
                .select("*")\
                .order("name")\
                .execute()
            return [TagResponse(**t) for t in result.data or []]
        except Exception as e:
            raise to_http_exception(e)

    def create_tag(self, tag_data: TagCreate) -> TagResponse:
        try:
            result = self.supabase.table("tags").insert(self._row(tag_data)).execute()
            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to create tag")
            logger.info(f"Created tag {result.data[0]['slug']}")
            return TagResponse(**result.data[0])
        except Exception as e:
            raise to_http_exception(e, conflict=TAG_EXISTS)

    def update_tag(self, tag_id: str, tag_data: TagUpdate) -> TagResponse:
        try:
            result = self.supabase.table("tags")\
                .update(self._row(tag_data))\
                .eq("id", tag_id)\
                .execute()
            if not result.data:
                raise HTTPException(status_code=404, detail="Tag not found")
            return TagResponse(**result.data[0])
        except Exception as e:
            raise to_http_exception(e, not_found="Tag not found", conflict=TAG_EXISTS)

    def delete_tag(self, tag_id: str) -> bool:
        try:
            result = self.supabase.table("tags")\
                .delete()\
                .eq("id", tag_id)\
                .execute()
            if not result.data:
                raise HTTPException(status_code=404, detail="Tag not found")
            return True
        except Exception as e:
            raise to_http_exception(e, not_found="Tag not found")
