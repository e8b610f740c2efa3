from supabase import Client
from app.config import settings
from app.core.errors import to_http_exception
from app.modules.emails.service import EmailService
from app.modules.subscribers.schemas import SubscribeRequest, SubscriberResponse, SubscribeResponse
from typing import List, Optional
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)

ALREADY_SUBSCRIBED = "This email is already on our subscriber list"


class SubscriberService:
    def __init__(self, supabase: Client, email_service: Optional[EmailService] = None):
        self.supabase = supabase
        self.email_service = email_service

    def subscribe(self, body: SubscribeRequest) -> SubscribeResponse:
        try:
            result = self.supabase.table("email_subscribers").insert({
                "email": body.email,
                "name": body.name,
            }).execute()
            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to subscribe")
            subscriber = SubscriberResponse(**result.data[0])
        except Exception as e:
            raise to_http_exception(e, conflict=ALREADY_SUBSCRIBED)

        sent = False
        if settings.send_welcome_on_subscribe and self.email_service is not None:
            try:
                self.email_service.send_welcome_email(subscriber.email, subscriber.name)
                sent = True
            except HTTPException as e:
                logger.warning(f"Subscriber {subscriber.email} saved but welcome email failed: {e.detail}")
        return SubscribeResponse(
            subscriber=subscriber,
            welcome_email_sent=sent,
            message="Thanks for subscribing",
        )

    def list_subscribers(self, limit: int = 100, offset: int = 0) -> List[SubscriberResponse]:
        try:
            result = self.supabase.table("email_subscribers")\
                .select("*")\
                .order("created_at", desc=True)\
                .limit(limit)\
                .offset(offset)\
                .execute()
            return [SubscriberResponse(**s) for s in result.data or []]
        except Exception as e:
            raise to_http_exception(e)
