from pydantic import BaseModel, field_validator
from typing import Optional
from datetime import datetime, date


class ProfileUpdate(BaseModel):
    full_name: Optional[str] = None
    username: Optional[str] = None
    bio: Optional[str] = None
    phone: Optional[str] = None
    date_of_birth: Optional[date] = None

    @field_validator("date_of_birth", mode="before")
    @classmethod
    def blank_date_is_null(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class ProfileResponse(BaseModel):
    id: str
    full_name: Optional[str] = None
    username: Optional[str] = None
    bio: Optional[str] = None
    phone: Optional[str] = None
    avatar_url: Optional[str] = None
    date_of_birth: Optional[date] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class SavedPostCreate(BaseModel):
    post_id: str


class SavedPostSummary(BaseModel):
    id: str
    title: str
    excerpt: Optional[str] = None
    created_at: datetime
    reading_time: Optional[int] = None


class SavedPostResponse(BaseModel):
    id: str
    created_at: datetime
    posts: Optional[SavedPostSummary] = None
