from supabase import Client
from app.config.content_config import get_category_label
from app.core.errors import to_http_exception
from app.modules.documents.schemas import (
    DocumentCreate, DocumentUpdate, DocumentResponse, DocumentViewResponse
)
from app.modules.storage.service import StorageService, DOCUMENTS_PREFIX, file_type_for
from typing import List, Optional, Dict, Any
from fastapi import HTTPException
from datetime import datetime
import logging

logger = logging.getLogger(__name__)


def _to_response(row: Dict[str, Any]) -> DocumentResponse:
    doc = DocumentResponse(**row)
    doc.category_label = get_category_label(doc.category)
    return doc


class DocumentService:
    def __init__(self, supabase: Client, storage: Optional[StorageService] = None):
        self.supabase = supabase
        self.storage = storage

    def list_documents(self, category: Optional[str] = None) -> List[DocumentResponse]:
        """Pinned documents first, then newest first"""
        try:
            query = self.supabase.table("documents").select("*")
            if category:
                query = query.eq("category", category)
            result = query.order("is_pinned", desc=True)\
                .order("created_at", desc=True)\
                .execute()
            return [_to_response(d) for d in result.data or []]
        except Exception as e:
            raise to_http_exception(e)

    def get_document(self, document_id: str) -> DocumentResponse:
        try:
            result = self.supabase.table("documents")\
                .select("*")\
                .eq("id", document_id)\
                .single()\
                .execute()
            if not result.data:
                raise HTTPException(status_code=404, detail="Document not found")
            return _to_response(result.data)
        except Exception as e:
            raise to_http_exception(e, not_found="Document not found")

    def view_document(self, document_id: str) -> DocumentViewResponse:
        """Inline HTML when the document has it, otherwise its file URL"""
        doc = self.get_document(document_id)
        if doc.html_content:
            return DocumentViewResponse(id=doc.id, title=doc.title, mode="html", html_content=doc.html_content)
        return DocumentViewResponse(id=doc.id, title=doc.title, mode="file", file_url=doc.file_url)

    def upload_file(self, content: bytes, filename: Optional[str], content_type: Optional[str]) -> Dict[str, str]:
        try:
            file_url = self.storage.upload(content, filename, content_type, prefix=DOCUMENTS_PREFIX)
        except Exception as e:
            logger.error(f"Error uploading file: {e}")
            raise HTTPException(status_code=500, detail=f"Failed to upload file: {str(e)}")
        return {"file_url": file_url, "file_type": file_type_for(filename, content_type)}

    def create_document(self, document_data: DocumentCreate, file_info: Optional[Dict[str, str]], user_id: str) -> DocumentResponse:
        if not file_info or not file_info.get("file_url"):
            raise HTTPException(status_code=400, detail="A file is required to create a document")
        try:
            result = self.supabase.table("documents").insert({
                "title": document_data.title,
                "description": document_data.description,
                "category": document_data.category,
                "is_pinned": document_data.is_pinned,
                "file_url": file_info["file_url"],
                "file_type": file_info["file_type"],
                "created_by": user_id,
            }).execute()
            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to create document")
            return _to_response(result.data[0])
        except Exception as e:
            raise to_http_exception(e)

    def update_document(self, document_id: str, document_data: DocumentUpdate, file_info: Optional[Dict[str, str]] = None) -> DocumentResponse:
        """Update metadata; the stored file is replaced only when a new one was uploaded"""
        try:
            update_data = {
                "title": document_data.title,
                "description": document_data.description,
                "category": document_data.category,
                "is_pinned": document_data.is_pinned,
                "updated_at": datetime.utcnow().isoformat(),
            }
            if file_info:
                update_data.update(file_info)
            result = self.supabase.table("documents")\
                .update(update_data)\
                .eq("id", document_id)\
                .execute()
            if not result.data:
                raise HTTPException(status_code=404, detail="Document not found")
            return _to_response(result.data[0])
        except Exception as e:
            raise to_http_exception(e, not_found="Document not found")

    def toggle_pin(self, document_id: str) -> DocumentResponse:
        current = self.get_document(document_id)
        try:
            result = self.supabase.table("documents")\
                .update({"is_pinned": not current.is_pinned})\
                .eq("id", document_id)\
                .execute()
            if not result.data:
                raise HTTPException(status_code=404, detail="Document not found")
            logger.info(f"Document {document_id} {'unpinned' if current.is_pinned else 'pinned'}")
            return _to_response(result.data[0])
        except Exception as e:
            raise to_http_exception(e, not_found="Document not found")

    def delete_document(self, document_id: str) -> bool:
        try:
            result = self.supabase.table("documents")\
                .delete()\
                .eq("id", document_id)\
                .execute()
            if not result.data:
                raise HTTPException(status_code=404, detail="Document not found")
            return True
        except Exception as e:
            raise to_http_exception(e, not_found="Document not found")
