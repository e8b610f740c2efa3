"""
Create Admin User Script
Provisions the site owner's account with the admin and user roles.
Credentials come from ADMIN_EMAIL / ADMIN_PASSWORD / ADMIN_FULL_NAME / ADMIN_USERNAME.
"""

import sys
import logging

from fastapi import HTTPException

from app.database.supabase_client import get_supabase_admin
from app.modules.admin_bootstrap.service import AdminBootstrapService

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main() -> int:
    admin_client = get_supabase_admin()
    if admin_client is None:
        logger.error("SUPABASE_SERVICE_ROLE_KEY is required to create the admin user")
        return 1
    try:
        result = AdminBootstrapService(admin_client).create_admin_user()
    except HTTPException as e:
        logger.error(f"Error creating admin user: {e.detail}")
        return 1
    logger.info(f"{result.message} email={result.credentials.email} user_id={result.credentials.user_id}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
