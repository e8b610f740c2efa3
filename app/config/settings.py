from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional, List


class Settings(BaseSettings):
    # Supabase
    supabase_url: str = ""
    supabase_key: str = ""
    supabase_service_role_key: Optional[str] = None  # Required for auth admin calls (user emails, admin bootstrap)
    storage_bucket: str = "blog-images"

    # AWS S3 (optional; Supabase Storage is used when not configured)
    aws_access_key_id: Optional[str] = None
    aws_secret_access_key: Optional[str] = None
    aws_region: str = "us-east-1"
    s3_bucket_name: Optional[str] = None

    # Email (Resend)
    resend_api_key: Optional[str] = None
    email_from: str = "John Deus <onboarding@resend.dev>"
    send_welcome_on_subscribe: bool = True

    # Admin bootstrap
    enable_admin_bootstrap: bool = False
    admin_email: str = "admin@johndeus.com"
    admin_password: str = "Admin123!"
    admin_full_name: str = "John Deus Admin"
    admin_username: str = "admin_johndeus"

    # App
    app_name: str = "deus-blog"
    site_url: str = "http://localhost:5173"
    debug: bool = False
    environment: str = "development"  # development | staging | production
    log_level: str = "INFO"
    cors_origins: str = "http://localhost:3000,http://localhost:5173,http://127.0.0.1:3000,http://127.0.0.1:5173"
    rate_limit: str = "100/minute"  # slowapi format, e.g. "100/minute"
    email_rate_limit: str = "5/minute"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def s3_enabled(self) -> bool:
        return all([self.aws_access_key_id, self.aws_secret_access_key, self.s3_bucket_name])

    def get_cors_origins_list(self) -> List[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",  # No prefix needed
        extra="ignore"
    )


settings = Settings()
