"""Email service using SendGrid."""

import logging

from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Mail

from src.config import get_settings

logger = logging.getLogger(__name__)


class EmailService:
    """Service for sending transactional emails via SendGrid."""

    def __init__(self) -> None:
        self.settings = get_settings()

    def send(self, to_email: str, subject: str, body: str) -> bool:
        """Send a plain-text email. Returns True if it was accepted for delivery."""
        if not self.settings.sendgrid_api_key:
            logger.warning("SendGrid API key not configured, cannot send email")
            return False

        message = Mail(
            from_email=(self.settings.email_from_address, self.settings.email_from_name),
            to_emails=to_email,
            subject=subject,
            plain_text_content=body,
        )

        try:
            sg = SendGridAPIClient(self.settings.sendgrid_api_key)
            response = sg.send(message)
            logger.info(f"Email sent to {to_email}, status: {response.status_code}")
            return response.status_code in (200, 201, 202)
        except Exception:
            logger.exception(f"Failed to send email to {to_email}")
            return False

    def send_password_reset_email(self, email: str, reset_url: str) -> bool:
        """Send the password reset link."""
        body = (
            "You are receiving this email because you (or someone else) has requested "
            "the reset of a password. Please make a PUT request to: \n\n"
            f"{reset_url}\n\n"
            f"This link expires in {self.settings.reset_token_expiration_minutes} minutes."
        )
        return self.send(email, "Password reset token", body)
