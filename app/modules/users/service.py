from supabase import Client
from app.core.errors import to_http_exception
from app.modules.users.schemas import UserWithRolesResponse, UserRolesResponse
from typing import List, Optional, Dict
import logging

logger = logging.getLogger(__name__)

DEFAULT_ROLES = ["user"]
AUTH_USERS_PAGE_SIZE = 200
PROFILE_FIELDS = set(UserWithRolesResponse.model_fields) - {"email", "roles"}


def filter_users(users: List[UserWithRolesResponse], search: Optional[str]) -> List[UserWithRolesResponse]:
    """Case-insensitive match on name, username and email; phone is matched as typed"""
    if not search:
        return users
    term = search.lower()

    def matches(user: UserWithRolesResponse) -> bool:
        for value in (user.full_name, user.username, user.email):
            if value and term in value.lower():
                return True
        return bool(user.phone and search in user.phone)

    return [u for u in users if matches(u)]


class UserService:
    def __init__(self, supabase: Client, admin_client: Optional[Client] = None):
        self.supabase = supabase
        self.admin_client = admin_client

    def _emails_by_id(self) -> Dict[str, str]:
        """Emails from auth.users; empty when no service-role client is available"""
        if self.admin_client is None:
            return {}
        try:
            emails: Dict[str, str] = {}
            page = 1
            while True:
                batch = self.admin_client.auth.admin.list_users(page=page, per_page=AUTH_USERS_PAGE_SIZE)
                emails.update({u.id: u.email for u in batch if u.email})
                if len(batch) < AUTH_USERS_PAGE_SIZE:
                    return emails
                page += 1
        except Exception as e:
            logger.warning(f"Could not read user emails from auth admin API: {e}")
            return {}

    def _roles_by_user(self, user_ids: List[str]) -> Dict[str, List[str]]:
        if not user_ids:
            return {}
        result = self.supabase.table("user_roles")\
            .select("user_id, role")\
            .in_("user_id", user_ids)\
            .execute()
        out: Dict[str, List[str]] = {}
        for r in result.data or []:
            out.setdefault(r["user_id"], []).append(r["role"])
        return out

    def list_users(self, search: Optional[str] = None) -> List[UserWithRolesResponse]:
        """All profiles, newest first, with roles and emails"""
        try:
            result = self.supabase.table("profiles")\
                .select("*")\
                .order("created_at", desc=True)\
                .execute()
            profiles = result.data or []
            roles = self._roles_by_user([p["id"] for p in profiles])
            emails = self._emails_by_id()
            users = [
                UserWithRolesResponse(
                    **{k: v for k, v in p.items() if k in PROFILE_FIELDS},
                    email=emails.get(p["id"]),
                    roles=sorted(roles.get(p["id"]) or DEFAULT_ROLES),
                )
                for p in profiles
            ]
            return filter_users(users, search)
        except Exception as e:
            raise to_http_exception(e)

    def get_roles(self, user_id: str) -> UserRolesResponse:
        try:
            roles = self._roles_by_user([user_id]).get(user_id) or DEFAULT_ROLES
            return UserRolesResponse(user_id=user_id, roles=sorted(roles))
        except Exception as e:
            raise to_http_exception(e)

    def set_roles(self, user_id: str, roles: List[str]) -> UserRolesResponse:
        """Make the user's role rows equal `roles`.

        New rows go in before stale ones are removed, so a failed write never
        leaves the user with fewer roles than either the old or the new set.
        """
        try:
            current = set(self._roles_by_user([user_id]).get(user_id) or [])
            missing = [role for role in roles if role not in current]
            stale = sorted(current - set(roles))
            if missing:
                self.supabase.table("user_roles")\
                    .insert([{"user_id": user_id, "role": role} for role in missing])\
                    .execute()
            if stale:
                self.supabase.table("user_roles")\
                    .delete()\
                    .eq("user_id", user_id)\
                    .in_("role", stale)\
                    .execute()
            logger.info(f"Roles of user {user_id} set to {roles}")
            return UserRolesResponse(user_id=user_id, roles=sorted(roles))
        except Exception as e:
            raise to_http_exception(e)
