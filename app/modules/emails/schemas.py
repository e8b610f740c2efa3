from pydantic import BaseModel, EmailStr
from typing import Optional


class WelcomeEmailRequest(BaseModel):
    email: EmailStr
    name: Optional[str] = None
