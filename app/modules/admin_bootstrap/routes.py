from fastapi import APIRouter, Depends, HTTPException, Request
from app.config import settings
from app.core.rate_limit import limiter
from app.database.supabase_client import get_supabase_admin
from app.modules.admin_bootstrap.schemas import AdminBootstrapResponse
from app.modules.admin_bootstrap.service import AdminBootstrapService
from supabase import Client
from typing import Optional

router = APIRouter(prefix="/admin-bootstrap", tags=["admin-bootstrap"])


def get_bootstrap_service(admin_client: Optional[Client] = Depends(get_supabase_admin)) -> AdminBootstrapService:
    if not settings.enable_admin_bootstrap:
        raise HTTPException(status_code=404, detail="Not found")
    if admin_client is None:
        raise HTTPException(status_code=500, detail="Service role key not configured. Cannot create admin user.")
    return AdminBootstrapService(admin_client)


@router.post("", response_model=AdminBootstrapResponse)
@limiter.limit("1/minute")
async def create_admin_user(
    request: Request,
    service: AdminBootstrapService = Depends(get_bootstrap_service),
):
    """Create the configured admin account. Disabled unless ENABLE_ADMIN_BOOTSTRAP=true."""
    return service.create_admin_user()
