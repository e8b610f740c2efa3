from supabase import Client


class SupabaseStorage:
    """Public Supabase Storage bucket"""

    def __init__(self, supabase: Client, bucket_name: str):
        self.supabase = supabase
        self.bucket_name = bucket_name

    def upload_file(self, file_content: bytes, key: str, content_type: str = "application/octet-stream") -> str:
        self.supabase.storage.from_(self.bucket_name).upload(
            key,
            file_content,
            file_options={"content-type": content_type}
        )
        return self.get_public_url(key)

    def get_public_url(self, key: str) -> str:
        return self.supabase.storage.from_(self.bucket_name).get_public_url(key)
