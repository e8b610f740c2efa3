from pydantic import BaseModel, EmailStr
from typing import Optional
from datetime import datetime


class SubscribeRequest(BaseModel):
    email: EmailStr
    name: Optional[str] = None


class SubscriberResponse(BaseModel):
    id: str
    email: str
    name: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class SubscribeResponse(BaseModel):
    subscriber: SubscriberResponse
    welcome_email_sent: bool
    message: str
