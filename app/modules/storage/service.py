import os
import time
import uuid
from supabase import Client
from app.config import settings
from app.modules.storage.s3_storage import S3Storage
from app.modules.storage.supabase_storage import SupabaseStorage
from typing import Optional
import logging

logger = logging.getLogger(__name__)

DOCUMENTS_PREFIX = "documents/"


def unique_object_name(filename: Optional[str], prefix: str = "") -> str:
    """`<prefix><epoch millis>-<random hex>.<ext>`; the extension is taken from the upload name."""
    ext = os.path.splitext(filename or "")[1].lstrip(".").lower() or "bin"
    return f"{prefix}{int(time.time() * 1000)}-{uuid.uuid4().hex}.{ext}"


def file_type_for(filename: Optional[str], content_type: Optional[str]) -> str:
    """Declared content type, else the bare file extension"""
    if content_type:
        return content_type
    return os.path.splitext(filename or "")[1].lstrip(".").lower()


class StorageService:
    def __init__(self, supabase: Client):
        self.backend = None
        if settings.s3_enabled:
            try:
                self.backend = S3Storage()
                logger.info("S3 storage initialized successfully")
            except Exception as e:
                logger.warning(f"S3 storage initialization failed ({str(e)}), will use Supabase Storage")
        if self.backend is None:
            self.backend = SupabaseStorage(supabase, settings.storage_bucket)

    def upload(self, file_content: bytes, filename: Optional[str], content_type: Optional[str], prefix: str = "") -> str:
        """Store the bytes under a fresh unique name and return the public URL"""
        key = unique_object_name(filename, prefix)
        url = self.backend.upload_file(file_content, key, content_type or "application/octet-stream")
        logger.info(f"Uploaded {filename or key} as {key}")
        return url
