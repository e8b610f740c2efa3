from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

DEFAULT_TAG_COLOR = "#3b82f6"


class TagCreate(BaseModel):
    name: str = Field(..., min_length=1)
    slug: Optional[str] = None
    description: Optional[str] = ""
    color: str = DEFAULT_TAG_COLOR


class TagUpdate(TagCreate):
    pass


class TagResponse(BaseModel):
    id: str
    name: str
    slug: str
    description: Optional[str] = None
    color: Optional[str] = DEFAULT_TAG_COLOR
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
