"""Email service using Resend for sending transactional emails."""

import logging
from typing import Any, Dict, Optional

import resend
from fastapi import HTTPException

from app.config import settings
from app.modules.emails.templates import WELCOME_SUBJECT, render_welcome_email

logger = logging.getLogger(__name__)


class EmailService:
    def __init__(self, api_key: Optional[str] = None, sender: Optional[str] = None):
        self.api_key = api_key if api_key is not None else settings.resend_api_key
        self.sender = sender or settings.email_from

    def send_welcome_email(self, to_email: str, name: Optional[str] = None) -> Dict[str, Any]:
        """Send the welcome email and return the Resend response (contains the message id)"""
        if not self.api_key:
            logger.error("RESEND_API_KEY not configured - cannot send welcome email")
            raise HTTPException(status_code=500, detail="Email sending is not configured")

        resend.api_key = self.api_key
        params: resend.Emails.SendParams = {
            "from": self.sender,
            "to": [to_email],
            "subject": WELCOME_SUBJECT,
            "html": render_welcome_email(name),
        }
        logger.info(f"Processing welcome email request for {to_email}")
        try:
            response = resend.Emails.send(params)
        except Exception as e:
            logger.error(f"Error sending welcome email to {to_email}: {e}")
            raise HTTPException(status_code=500, detail=str(e))
        logger.info(f"Welcome email sent to {to_email}, id: {response.get('id', 'unknown')}")
        return dict(response)
