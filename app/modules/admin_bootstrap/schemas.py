from pydantic import BaseModel
from typing import Optional


class AdminCredentials(BaseModel):
    email: str
    password: str
    user_id: Optional[str] = None


class AdminBootstrapResponse(BaseModel):
    success: bool
    credentials: AdminCredentials
    message: str
