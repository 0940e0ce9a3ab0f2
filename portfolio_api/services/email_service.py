"""SMTP email sender for contact form notifications."""
import logging
import smtplib
from email.message import EmailMessage
from html import escape
from typing import Optional, Tuple

from portfolio_api.core.config import Settings, settings as default_settings

logger = logging.getLogger(__name__)


def send_email(
    *,
    host: str,
    port: int,
    username: str,
    password: str,
    secure: str,
    from_email: str,
    from_name: str,
    to_email: str,
    subject: str,
    html: str,
    text: str,
) -> Tuple[bool, Optional[str]]:
    """Send one message, returns (ok, error) and never raises"""
    if not host or not port:
        return False, "missing_smtp"
    if not from_email:
        return False, "missing_from"
    msg = EmailMessage()
    msg["Subject"] = subject or "Portfolio Contact"
    msg["From"] = f"{from_name} <{from_email}>" if from_name else from_email
    msg["To"] = to_email
    if text:
        msg.set_content(text)
    if html:
        msg.add_alternative(html, subtype="html")
    try:
        if secure == "ssl":
            server = smtplib.SMTP_SSL(host, port, timeout=10)
        else:
            server = smtplib.SMTP(host, port, timeout=10)
        try:
            if secure == "tls":
                server.starttls()
            if username:
                server.login(username, password or "")
            server.send_message(msg)
        finally:
            server.quit()
    except (smtplib.SMTPException, OSError) as e:
        return False, str(e)[:200]
    return True, None


def notify_new_contact(message: dict, config: Settings = None) -> bool:
    """
    Forward a new contact message to CONTACT_NOTIFY_EMAIL.

    Does nothing when SMTP or the recipient is not configured.
    """
    config = config or default_settings
    if not config.SMTP_HOST or not config.CONTACT_NOTIFY_EMAIL:
        return False

    name = message.get("name", "")
    email = message.get("email", "")
    body = message.get("message", "")
    ok, error = send_email(
        host=config.SMTP_HOST,
        port=config.SMTP_PORT,
        username=config.SMTP_USER,
        password=config.SMTP_PASSWORD,
        secure=config.SMTP_SECURE,
        from_email=config.SMTP_FROM or config.SMTP_USER,
        from_name="Portfolio Contact",
        to_email=config.CONTACT_NOTIFY_EMAIL,
        subject=f"New contact message from {name}",
        text=f"Name: {name}\nEmail: {email}\n\n{body}",
        html=(
            f"<p><strong>Name:</strong> {escape(name)}<br>"
            f"<strong>Email:</strong> {escape(email)}</p>"
            f"<p>{escape(body)}</p>"
        ),
    )
    if not ok:
        logger.warning("Contact notification email failed: %s", error)
    return ok
