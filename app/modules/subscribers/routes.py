from fastapi import APIRouter, Depends, Request
from app.config import settings
from app.core.dependencies import get_request_supabase, require_admin
from app.core.rate_limit import limiter
from app.modules.emails.routes import get_email_service
from app.modules.emails.service import EmailService
from app.modules.subscribers.schemas import SubscribeRequest, SubscriberResponse, SubscribeResponse
from app.modules.subscribers.service import SubscriberService
from supabase import Client
from typing import List, Dict

router = APIRouter(prefix="/subscribers", tags=["subscribers"])


def get_subscriber_service(
    supabase: Client = Depends(get_request_supabase),
    email_service: EmailService = Depends(get_email_service),
) -> SubscriberService:
    return SubscriberService(supabase, email_service)


@router.post("", response_model=SubscribeResponse, status_code=201)
@limiter.limit(settings.email_rate_limit)
async def subscribe(
    request: Request,
    body: SubscribeRequest,
    service: SubscriberService = Depends(get_subscriber_service),
):
    """Join the mailing list; an already registered email is a 409"""
    return service.subscribe(body)


@router.get("", response_model=List[SubscriberResponse])
async def list_subscribers(
    limit: int = 100,
    offset: int = 0,
    user_data: Dict = Depends(require_admin),
    service: SubscriberService = Depends(get_subscriber_service),
):
    return service.list_subscribers(limit=limit, offset=offset)
