import html
import re

from .. import schemas
from ..utils.exceptions import ValidationError
from .email_service import EmailService

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def build_contact_email(name: str, email: str, subject: str, message: str) -> str:
    body = html.escape(message).replace("\n", "<br>")
    return (
        "<h2>New Contact Form Submission</h2>"
        f"<p><strong>Name:</strong> {html.escape(name)}</p>"
        f"<p><strong>Email:</strong> {html.escape(email)}</p>"
        f"<p><strong>Subject:</strong> {html.escape(subject or 'No subject')}</p>"
        "<hr />"
        "<p><strong>Message:</strong></p>"
        f"<p>{body}</p>"
    )


def submit_contact(data: schemas.ContactRequest, email_service: EmailService) -> None:
    """Validates a contact form submission and forwards it by email."""
    if not (data.name and data.email and data.message):
        raise ValidationError("Name, email, and message are required")
    if not EMAIL_PATTERN.match(data.email):
        raise ValidationError("Invalid email address")

    subject = data.subject or f"Contact Form: Message from {data.name}"
    email_service.send(
        subject=subject,
        html=build_contact_email(data.name, data.email, data.subject or "", data.message),
        reply_to=data.email,
    )
