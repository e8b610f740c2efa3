from supabase import Client
from app.config import settings
from app.modules.admin_bootstrap.schemas import AdminBootstrapResponse, AdminCredentials
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)

BOOTSTRAP_ROLES = ["admin", "user"]


class AdminBootstrapService:
    """Provision the site owner's account. Needs a service_role client."""

    def __init__(self, admin_client: Client):
        self.admin_client = admin_client

    def create_admin_user(self) -> AdminBootstrapResponse:
        logger.info("Creating admin user...")
        try:
            response = self.admin_client.auth.admin.create_user({
                "email": settings.admin_email,
                "password": settings.admin_password,
                "email_confirm": True,
                "user_metadata": {
                    "full_name": settings.admin_full_name,
                    "username": settings.admin_username,
                },
            })
        except Exception as e:
            logger.error(f"Sign up error: {e}")
            raise HTTPException(status_code=400, detail=str(e))

        user_id = response.user.id if response and response.user else None
        if not user_id:
            raise HTTPException(status_code=400, detail="Admin user was not created")
        logger.info(f"Admin user created: {user_id}")

        try:
            self.admin_client.table("user_roles")\
                .insert([{"user_id": user_id, "role": role} for role in BOOTSTRAP_ROLES])\
                .execute()
        except Exception as e:
            # The account exists either way; roles can be fixed from the users admin API
            logger.error(f"Role assignment error: {e}")

        return AdminBootstrapResponse(
            success=True,
            credentials=AdminCredentials(
                email=settings.admin_email,
                password=settings.admin_password,
                user_id=user_id,
            ),
            message="Admin user created successfully!",
        )
