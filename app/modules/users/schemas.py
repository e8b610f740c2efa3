from pydantic import BaseModel, Field, field_validator
from typing import Optional, List
from datetime import datetime, date
from app.config.content_config import APP_ROLES


class UserWithRolesResponse(BaseModel):
    id: str
    email: Optional[str] = None
    full_name: Optional[str] = None
    username: Optional[str] = None
    phone: Optional[str] = None
    avatar_url: Optional[str] = None
    date_of_birth: Optional[date] = None
    roles: List[str] = ["user"]
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class UserRolesUpdate(BaseModel):
    roles: List[str] = Field(..., min_length=1)

    @field_validator("roles")
    @classmethod
    def known_roles(cls, value: List[str]) -> List[str]:
        unknown = [r for r in value if r not in APP_ROLES]
        if unknown:
            raise ValueError(f"Unknown roles: {', '.join(unknown)}")
        return sorted(set(value))


class UserRolesResponse(BaseModel):
    user_id: str
    roles: List[str]
