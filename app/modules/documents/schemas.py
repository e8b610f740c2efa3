from pydantic import BaseModel
from typing import Optional
from datetime import datetime
from app.config.content_config import DEFAULT_DOCUMENT_CATEGORY


class DocumentCreate(BaseModel):
    title: str
    description: Optional[str] = ""
    category: str = DEFAULT_DOCUMENT_CATEGORY
    is_pinned: bool = False


class DocumentUpdate(DocumentCreate):
    pass


class DocumentResponse(BaseModel):
    id: str
    title: str
    description: Optional[str] = None
    file_url: Optional[str] = None
    file_type: Optional[str] = None
    html_content: Optional[str] = None
    category: str = DEFAULT_DOCUMENT_CATEGORY
    category_label: Optional[str] = None
    is_pinned: bool = False
    created_by: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class DocumentViewResponse(BaseModel):
    id: str
    title: str
    mode: str  # "html" | "file"
    html_content: Optional[str] = None
    file_url: Optional[str] = None


class CategoryResponse(BaseModel):
    value: str
    label: str
