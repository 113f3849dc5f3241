import logging
from typing import Optional

import requests

from ..core.config import settings
from ..utils.exceptions import UpstreamError

logger = logging.getLogger(__name__)


class EmailService:
    """Sends notification email through the Resend HTTP API."""

    def __init__(
        self,
        api_key: Optional[str],
        api_url: str,
        sender: str,
        recipient: str,
        timeout: float = 10.0,
    ):
        self.api_key = api_key
        self.api_url = api_url
        self.sender = sender
        self.recipient = recipient
        self.timeout = timeout

    def send(self, subject: str, html: str, reply_to: Optional[str] = None) -> None:
        if not self.api_key:
            logger.error("RESEND_API_KEY not configured")
            raise UpstreamError("Email service not configured")

        payload = {
            "from": self.sender,
            "to": self.recipient,
            "subject": subject,
            "html": html,
        }
        if reply_to:
            payload["reply_to"] = reply_to

        try:
            response = requests.post(
                self.api_url,
                json=payload,
                headers={"Authorization": f"Bearer {self.api_key}"},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"Email request failed: {e}")
            raise UpstreamError("Failed to send email") from e

        if not response.ok:
            logger.error(f"Resend API error {response.status_code}: {response.text[:500]}")
            raise UpstreamError("Failed to send email")


def get_email_service() -> EmailService:
    """FastAPI dependency to get the configured EmailService."""
    return EmailService(
        api_key=settings.RESEND_API_KEY,
        api_url=settings.RESEND_API_URL,
        sender=settings.EMAIL_FROM,
        recipient=settings.EMAIL_TO,
        timeout=settings.EMAIL_TIMEOUT_SECONDS,
    )
