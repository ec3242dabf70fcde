import html
import logging

from fastapi import Depends
from fastapi.concurrency import run_in_threadpool

from portfolio.core.config import Settings, get_settings
from portfolio.utils.email_utils import send_email

logger = logging.getLogger(__name__)


def _one_line(value: str) -> str:
    return " ".join(value.splitlines()).strip()


def contact_subject(contact: dict) -> str:
    # Header values must not contain CR or LF
    subject = _one_line(contact.get("subject") or "")
    if subject:
        return f"Portfolio Contact: {subject}"
    return f"Portfolio Contact: New message from {_one_line(contact['name'])}"


def contact_text(contact: dict) -> str:
    return f"""
New contact form submission

- Name: {contact['name']}
- Email: {contact['email']}
- Subject: {contact.get('subject') or '-'}

Message:
{contact['message']}

This email was sent from your portfolio contact form.
"""


def contact_html(contact: dict) -> str:
    name = html.escape(contact["name"])
    email = html.escape(contact["email"])
    subject = html.escape(contact.get("subject") or "-")
    message = html.escape(contact["message"]).replace("\n", "<br>")
    return f"""
<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
  <h2 style="color: #333;">New Contact Form Submission</h2>
  <div style="background-color: #f9f9f9; padding: 20px; border-radius: 5px;">
    <p><strong>Name:</strong> {name}</p>
    <p><strong>Email:</strong> {email}</p>
    <p><strong>Subject:</strong> {subject}</p>
    <p><strong>Message:</strong></p>
    <div style="background-color: white; padding: 15px; border-left: 4px solid #007bff; margin-top: 10px;">
      {message}
    </div>
  </div>
  <p style="color: #666; font-size: 12px; margin-top: 20px;">
    This email was sent from your portfolio contact form.
  </p>
</div>
"""


class ContactNotifier:
    """Sends one operator email per stored contact message."""

    def __init__(self, settings: Settings):
        self.settings = settings

    async def notify(self, contact: dict) -> bool:
        recipient = self.settings.CONTACT_RECIPIENT
        if not recipient:
            logger.warning("CONTACT_RECIPIENT not set, skipping notification for contact %s", contact.get("id"))
            return False

        try:
            await run_in_threadpool(
                send_email,
                recipient,
                contact_subject(contact),
                contact_text(contact),
                html=contact_html(contact),
                reply_to=contact["email"],
                settings=self.settings,
            )
        except Exception as e:
            logger.warning("Contact %s saved but notification failed: %s", contact.get("id"), e)
            return False
        return True


def get_contact_notifier(settings: Settings = Depends(get_settings)) -> ContactNotifier:
    return ContactNotifier(settings)
