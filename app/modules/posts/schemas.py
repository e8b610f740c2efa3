from pydantic import BaseModel
from typing import Optional, List
from datetime import datetime


class AuthorInfo(BaseModel):
    full_name: str = ""
    username: str = ""


class PostCreate(BaseModel):
    title: str
    content: str
    excerpt: Optional[str] = None
    published: bool = False
    tags: List[str] = []


class PostUpdate(BaseModel):
    title: Optional[str] = None
    content: Optional[str] = None
    excerpt: Optional[str] = None
    published: Optional[bool] = None
    tags: Optional[List[str]] = None
    featured_image: Optional[str] = None


class PostResponse(BaseModel):
    id: str
    title: str
    content: Optional[str] = None
    excerpt: Optional[str] = None
    featured_image: Optional[str] = None
    author_id: str
    published: bool = False
    tags: List[str] = []
    reading_time: Optional[int] = None
    created_at: datetime
    updated_at: Optional[datetime] = None
    profiles: AuthorInfo = AuthorInfo()

    class Config:
        from_attributes = True


class PostShareResponse(BaseModel):
    post_id: str
    title: str
    url: str
