import logging
import smtplib
from email.message import EmailMessage
from typing import Optional

from portfolio.core.config import Settings

logger = logging.getLogger(__name__)


def build_message(
    sender: str,
    to_email: str,
    subject: str,
    body: str,
    html: Optional[str] = None,
    reply_to: Optional[str] = None,
) -> EmailMessage:
    msg = EmailMessage()
    msg["Subject"] = subject
    msg["From"] = sender
    msg["To"] = to_email
    if reply_to:
        msg["Reply-To"] = reply_to
    msg.set_content(body)
    if html:
        msg.add_alternative(html, subtype="html")
    return msg


def send_email(
    to_email: str,
    subject: str,
    body: str,
    html: Optional[str] = None,
    reply_to: Optional[str] = None,
    *,
    settings: Settings,
):
    msg = build_message(settings.sender_address, to_email, subject, body, html, reply_to)

    try:
        if settings.SMTP_USE_SSL:
            smtp = smtplib.SMTP_SSL(settings.SMTP_SERVER, settings.SMTP_PORT, timeout=settings.SMTP_TIMEOUT)
        else:
            smtp = smtplib.SMTP(settings.SMTP_SERVER, settings.SMTP_PORT, timeout=settings.SMTP_TIMEOUT)
        with smtp:
            if not settings.SMTP_USE_SSL:
                smtp.ehlo()
                if smtp.has_extn("starttls"):
                    smtp.starttls()
                    smtp.ehlo()
            if settings.SMTP_USER:
                smtp.login(settings.SMTP_USER, settings.SMTP_PASSWORD)
            smtp.send_message(msg)
        logger.info("Email sent to %s", to_email)
    except (smtplib.SMTPException, OSError) as e:
        logger.error("Failed to send email to %s: %s", to_email, e)
        raise
