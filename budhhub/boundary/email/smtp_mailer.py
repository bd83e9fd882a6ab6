"""
SMTP email sender.

Thin wrapper over smtplib: builds a multipart message and sends it through
the configured server in a worker thread so the event loop is not blocked.

Dependencies: smtplib (stdlib), email (stdlib)
System role: Outgoing transactional email
"""

import asyncio
import logging
import smtplib
from email.message import EmailMessage

from budhhub.configs.smtp import SMTPSettings
from budhhub.core.exceptions import EmailDeliveryError

logger = logging.getLogger(__name__)


class SMTPMailer:
    """Sends HTML emails with a plain-text fallback."""

    def __init__(self, settings: SMTPSettings) -> None:
        self._settings = settings

    def _build_message(self, to: str, subject: str, html: str, text: str) -> EmailMessage:
        message = EmailMessage()
        message["From"] = self._settings.sender
        message["To"] = to
        message["Subject"] = subject
        message.set_content(text)
        message.add_alternative(html, subtype="html")
        return message

    def _send_sync(self, message: EmailMessage) -> None:
        settings = self._settings
        if settings.use_ssl:
            server = smtplib.SMTP_SSL(settings.host, settings.port, timeout=settings.timeout)
        else:
            server = smtplib.SMTP(settings.host, settings.port, timeout=settings.timeout)
        with server:
            if not settings.use_ssl:
                server.starttls()
            server.login(settings.user, settings.password)
            server.send_message(message)

    async def send(self, to: str, subject: str, html: str, text: str) -> None:
        """
        Send an email.

        Args:
            to: Recipient address
            subject: Subject line
            html: HTML body
            text: Plain-text body

        Raises:
            EmailDeliveryError: SMTP not configured or the server rejected the message
        """
        if not self._settings.is_configured:
            logger.error("SMTP configuration is missing")
            raise EmailDeliveryError("SMTP configuration is missing")

        message = self._build_message(to, subject, html, text)
        try:
            await asyncio.to_thread(self._send_sync, message)
        except (smtplib.SMTPException, OSError) as e:
            logger.error(
                "Email delivery failed",
                extra={"recipient": to, "error_type": type(e).__name__, "error": str(e)},
            )
            raise EmailDeliveryError(f"Failed to send email: {e}") from e

        logger.info("Email sent", extra={"recipient": to, "subject": subject})
