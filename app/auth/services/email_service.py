import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

import aiosmtplib

from app.core.config import settings
from app.core.constants import PASSWORD_RESET_PATH

logger = logging.getLogger(__name__)

_ACCENT = "#4F46E5"
_TEXT = "#111827"
_TEXT_MUTED = "#6B7280"


@dataclass
class EmailMessage:
    to: str
    subject: str
    body_html: str
    body_text: str


class EmailService(ABC):
    @abstractmethod
    async def send_email(self, message: EmailMessage) -> bool:
        pass


class ConsoleEmailService(EmailService):
    """Development backend: writes the message to the log instead of sending it."""

    async def send_email(self, message: EmailMessage) -> bool:
        logger.info(
            "Email (console backend)\nTo: %s\nSubject: %s\n\n%s",
            message.to,
            message.subject,
            message.body_text,
        )
        return True


class SMTPEmailService(EmailService):
    def __init__(
        self,
        smtp_host: str,
        smtp_port: int,
        username: str,
        password: str,
        from_email: str,
        from_name: str,
    ):
        self.smtp_host = smtp_host
        self.smtp_port = smtp_port
        self.username = username
        self.password = password
        self.from_email = from_email
        self.from_name = from_name

    async def send_email(self, message: EmailMessage) -> bool:
        msg = MIMEMultipart("alternative")
        msg["Subject"] = message.subject
        msg["From"] = f"{self.from_name} <{self.from_email}>"
        msg["To"] = message.to
        msg.attach(MIMEText(message.body_text, "plain"))
        msg.attach(MIMEText(message.body_html, "html"))

        try:
            await aiosmtplib.send(
                msg,
                hostname=self.smtp_host,
                port=self.smtp_port,
                username=self.username or None,
                password=self.password or None,
                start_tls=True,
            )
        except aiosmtplib.SMTPException as e:
            logger.error(f"Failed to send email to {message.to}: {e}")
            return False
        return True


def get_email_service() -> EmailService:
    if settings.EMAIL_BACKEND == "smtp":
        return SMTPEmailService(
            smtp_host=settings.SMTP_HOST,
            smtp_port=settings.SMTP_PORT,
            username=settings.SMTP_USERNAME,
            password=settings.SMTP_PASSWORD,
            from_email=settings.SMTP_FROM_EMAIL,
            from_name=settings.SMTP_FROM_NAME,
        )
    return ConsoleEmailService()


def build_password_reset_email(name: str, email: str, token: str) -> EmailMessage:
    reset_url = f"{settings.FRONTEND_URL}{PASSWORD_RESET_PATH}?token={token}"
    hours = settings.PASSWORD_RESET_TOKEN_EXPIRE_HOURS

    body_html = f"""\
<html>
<body style="font-family: Helvetica, Arial, sans-serif; color: {_TEXT};">
  <h2>Reset your password</h2>
  <p>Hi {name},</p>
  <p>We received a request to reset the password of your {settings.SMTP_FROM_NAME} account.</p>
  <p>
    <a href="{reset_url}"
       style="display: inline-block; padding: 10px 24px; background: {_ACCENT};
              color: #ffffff; text-decoration: none; border-radius: 6px;">
      Choose a new password
    </a>
  </p>
  <p style="color: {_TEXT_MUTED};">The link expires in {hours} hours.
  If you did not ask for a reset, you can ignore this message.</p>
</body>
</html>"""

    body_text = f"""\
Hi {name},

We received a request to reset the password of your {settings.SMTP_FROM_NAME} account.

Choose a new password here:
{reset_url}

The link expires in {hours} hours. If you did not ask for a reset, you can ignore this message."""

    return EmailMessage(
        to=email,
        subject=f"Reset your password - {settings.SMTP_FROM_NAME}",
        body_html=body_html,
        body_text=body_text,
    )
