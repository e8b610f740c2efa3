from fastapi import APIRouter, Depends, UploadFile, File, Form
from app.config.content_config import DOCUMENT_CATEGORIES, DEFAULT_DOCUMENT_CATEGORY
from app.modules.documents.schemas import (
    DocumentCreate, DocumentUpdate, DocumentResponse, DocumentViewResponse, CategoryResponse
)
from app.modules.documents.service import DocumentService
from app.modules.storage.service import StorageService
from app.core.dependencies import get_request_supabase, require_admin
from supabase import Client
from typing import List, Optional, Dict

router = APIRouter(prefix="/documents", tags=["documents"])


def get_document_service(supabase: Client = Depends(get_request_supabase)) -> DocumentService:
    return DocumentService(supabase, StorageService(supabase))


@router.get("", response_model=List[DocumentResponse])
async def list_documents(
    category: Optional[str] = None,
    service: DocumentService = Depends(get_document_service),
):
    """E-learning library: pinned first, then newest"""
    return service.list_documents(category=category)


@router.get("/categories", response_model=List[CategoryResponse])
async def list_categories():
    return DOCUMENT_CATEGORIES


@router.post("", response_model=DocumentResponse, status_code=201)
async def create_document(
    title: str = Form(...),
    description: Optional[str] = Form(""),
    category: str = Form(DEFAULT_DOCUMENT_CATEGORY),
    is_pinned: bool = Form(False),
    file: Optional[UploadFile] = File(None),
    user_data: Dict = Depends(require_admin),
    service: DocumentService = Depends(get_document_service),
):
    """Upload a document file with its metadata"""
    document_data = DocumentCreate(title=title, description=description, category=category, is_pinned=is_pinned)
    file_info = None
    if file is not None and file.filename:
        file_info = service.upload_file(await file.read(), file.filename, file.content_type)
    return service.create_document(document_data, file_info, user_data["id"])


@router.get("/{document_id}", response_model=DocumentResponse)
async def get_document(
    document_id: str,
    service: DocumentService = Depends(get_document_service),
):
    return service.get_document(document_id)


@router.get("/{document_id}/view", response_model=DocumentViewResponse)
async def view_document(
    document_id: str,
    service: DocumentService = Depends(get_document_service),
):
    return service.view_document(document_id)


@router.put("/{document_id}", response_model=DocumentResponse)
async def update_document(
    document_id: str,
    title: str = Form(...),
    description: Optional[str] = Form(""),
    category: str = Form(DEFAULT_DOCUMENT_CATEGORY),
    is_pinned: bool = Form(False),
    file: Optional[UploadFile] = File(None),
    user_data: Dict = Depends(require_admin),
    service: DocumentService = Depends(get_document_service),
):
    """Update metadata; sending a file replaces the stored one"""
    document_data = DocumentUpdate(title=title, description=description, category=category, is_pinned=is_pinned)
    file_info = None
    if file is not None and file.filename:
        file_info = service.upload_file(await file.read(), file.filename, file.content_type)
    return service.update_document(document_id, document_data, file_info)


@router.post("/{document_id}/pin", response_model=DocumentResponse)
async def toggle_pin(
    document_id: str,
    user_data: Dict = Depends(require_admin),
    service: DocumentService = Depends(get_document_service),
):
    return service.toggle_pin(document_id)


@router.delete("/{document_id}", status_code=204)
async def delete_document(
    document_id: str,
    user_data: Dict = Depends(require_admin),
    service: DocumentService = Depends(get_document_service),
):
    service.delete_document(document_id)
    return None
