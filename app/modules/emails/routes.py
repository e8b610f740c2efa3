from fastapi import APIRouter, Depends, Request
from app.config import settings
from app.core.rate_limit import limiter
from app.modules.emails.schemas import WelcomeEmailRequest
from app.modules.emails.service import EmailService

router = APIRouter(prefix="/emails", tags=["emails"])


def get_email_service() -> EmailService:
    return EmailService()


@router.post("/welcome")
@limiter.limit(settings.email_rate_limit)
async def send_welcome_email(
    request: Request,
    body: WelcomeEmailRequest,
    service: EmailService = Depends(get_email_service),
):
    """Send the templated welcome email; returns the provider response"""
    return service.send_welcome_email(body.email, body.name)
