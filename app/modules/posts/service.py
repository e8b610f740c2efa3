import math
from supabase import Client
from app.config import settings
from app.core.errors import to_http_exception
from app.modules.posts.schemas import PostCreate, PostUpdate, PostResponse, AuthorInfo, PostShareResponse
from app.modules.storage.service import StorageService
from typing import List, Optional, Dict, Any
from fastapi import HTTPException
from datetime import datetime
import logging

logger = logging.getLogger(__name__)

WORDS_PER_MINUTE = 200
NOT_PUBLISHED = "Post does not exist or is not published"


def estimate_reading_time(content: Optional[str]) -> int:
    words = len((content or "").split())
    return max(1, math.ceil(words / WORDS_PER_MINUTE))


def filter_posts(posts: List[PostResponse], search: Optional[str]) -> List[PostResponse]:
    """Case-insensitive substring match on title or excerpt"""
    if not search:
        return posts
    term = search.lower()
    return [
        p for p in posts
        if term in p.title.lower() or (p.excerpt and term in p.excerpt.lower())
    ]


class PostService:
    def __init__(self, supabase: Client, storage: Optional[StorageService] = None):
        self.supabase = supabase
        self.storage = storage

    def _authors(self, author_ids: List[str]) -> Dict[str, AuthorInfo]:
        ids = list({a for a in author_ids if a})
        if not ids:
            return {}
        result = self.supabase.table("profiles")\
            .select("id, full_name, username")\
            .in_("id", ids)\
            .execute()
        return {
            p["id"]: AuthorInfo(full_name=p.get("full_name") or "", username=p.get("username") or "")
            for p in result.data or []
        }

    def _with_authors(self, rows: List[Dict[str, Any]]) -> List[PostResponse]:
        authors = self._authors([r.get("author_id") for r in rows])
        posts = []
        for row in rows:
            row = {**row, "tags": row.get("tags") or []}
            row["profiles"] = authors.get(row.get("author_id")) or AuthorInfo()
            posts.append(PostResponse(**row))
        return posts

    def list_published(self, search: Optional[str] = None, limit: Optional[int] = None) -> List[PostResponse]:
        """Published posts, newest first, with author names"""
        try:
            query = self.supabase.table("posts")\
                .select("*")\
                .eq("published", True)\
                .order("created_at", desc=True)
            if limit and not search:
                query = query.limit(limit)
            result = query.execute()
            posts = filter_posts(self._with_authors(result.data or []), search)
            return posts[:limit] if limit else posts
        except Exception as e:
            raise to_http_exception(e)

    def list_all(self, limit: int = 50, offset: int = 0) -> List[PostResponse]:
        """All posts including drafts (admin)"""
        try:
            result = self.supabase.table("posts")\
                .select("*")\
                .order("created_at", desc=True)\
                .limit(limit)\
                .offset(offset)\
                .execute()
            return self._with_authors(result.data or [])
        except Exception as e:
            raise to_http_exception(e)

    def get_published(self, post_id: str) -> PostResponse:
        try:
            result = self.supabase.table("posts")\
                .select("*")\
                .eq("id", post_id)\
                .eq("published", True)\
                .single()\
                .execute()
            if not result.data:
                raise HTTPException(status_code=404, detail=NOT_PUBLISHED)
            return self._with_authors([result.data])[0]
        except Exception as e:
            raise to_http_exception(e, not_found=NOT_PUBLISHED)

    def share_link(self, post_id: str) -> PostShareResponse:
        post = self.get_published(post_id)
        return PostShareResponse(
            post_id=post.id,
            title=post.title,
            url=f"{settings.site_url.rstrip('/')}/blog/{post.id}",
        )

    def upload_featured_image(self, content: bytes, filename: Optional[str], content_type: Optional[str]) -> str:
        """Public URL of the stored image, or "" when the upload fails"""
        try:
            return self.storage.upload(content, filename, content_type)
        except Exception as e:
            logger.error(f"Error uploading image: {e}")
            return ""

    def create_post(self, post_data: PostCreate, author_id: str, featured_image: str = "") -> PostResponse:
        try:
            result = self.supabase.table("posts").insert({
                "title": post_data.title,
                "content": post_data.content,
                "excerpt": post_data.excerpt,
                "author_id": author_id,
                "published": post_data.published,
                "featured_image": featured_image,
                "tags": post_data.tags,
                "reading_time": estimate_reading_time(post_data.content),
            }).execute()

            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to create post")

            state = "published" if post_data.published else "saved as draft"
            logger.info(f"Post {result.data[0]['id']} {state}")
            return self._with_authors(result.data)[0]
        except Exception as e:
            raise to_http_exception(e)

    def update_post(self, post_id: str, post_data: PostUpdate) -> PostResponse:
        try:
            update_data = post_data.model_dump(exclude_none=True)
            if "content" in update_data:
                update_data["reading_time"] = estimate_reading_time(update_data["content"])
            update_data["updated_at"] = datetime.utcnow().isoformat()

            result = self.supabase.table("posts")\
                .update(update_data)\
                .eq("id", post_id)\
                .execute()

            if not result.data:
                raise HTTPException(status_code=404, detail="Post not found")

            return self._with_authors(result.data)[0]
        except Exception as e:
            raise to_http_exception(e, not_found="Post not found")

    def delete_post(self, post_id: str) -> bool:
        try:
            result = self.supabase.table("posts")\
                .delete()\
                .eq("id", post_id)\
                .execute()
            if not result.data:
                raise HTTPException(status_code=404, detail="Post not found")
            return True
        except Exception as e:
            raise to_http_exception(e, not_found="Post not found")
