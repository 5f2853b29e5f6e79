"""Email service for verification codes and password reset links

Delivery is best effort: every public method returns False instead of raising,
and whenever a message cannot be delivered the code or link is written to the
server log so a developer can still complete the flow.
"""

import asyncio
import logging
import smtplib
from email.mime.text import MIMEText
from email.mime.multipart import MIMEMultipart
from typing import Optional

from ...core.config import settings

logger = logging.getLogger(__name__)


class EmailService:

    def __init__(self):
        self.smtp_host = settings.SMTP_HOST
        self.smtp_port = settings.SMTP_PORT
        self.smtp_username = settings.SMTP_USERNAME
        self.smtp_password = settings.SMTP_PASSWORD
        self.smtp_use_tls = settings.SMTP_USE_TLS
        self.timeout = settings.SMTP_TIMEOUT_SECONDS
        self.from_email = settings.FROM_EMAIL
        self.from_name = settings.FROM_NAME
        self.frontend_url = settings.FRONTEND_URL

    @property
    def is_configured(self) -> bool:
        return bool(self.smtp_username and self.smtp_password)

    async def send_email(self,
                         to_email: str,
                         subject: str,
                         html_content: str,
                         text_content: Optional[str] = None) -> bool:
        """Send email with HTML content"""
        if not self.is_configured:
            logger.info("Email not configured, skipping '%s' to %s", subject, to_email)
            return False

        msg = MIMEMultipart('alternative')
        msg['Subject'] = subject
        msg['From'] = f"{self.from_name} <{self.from_email}>"
        msg['To'] = to_email

        if text_content:
            msg.attach(MIMEText(text_content, 'plain'))
        msg.attach(MIMEText(html_content, 'html'))

        try:
            await asyncio.wait_for(self._send_smtp_email(msg), timeout=self.timeout)
        except asyncio.TimeoutError:
            logger.warning("Timed out sending '%s' to %s after %.1fs", subject, to_email, self.timeout)
            return False
        except Exception as e:
            logger.warning("Email sending failed for %s: %s", to_email, e)
            return False

        logger.info("Email '%s' sent to %s", subject, to_email)
        return True

    async def _send_smtp_email(self, msg: MIMEMultipart):
        """Send email via SMTP"""
        def send_sync():
            with smtplib.SMTP(self.smtp_host, self.smtp_port, timeout=self.timeout) as server:
                if self.smtp_use_tls:
                    server.starttls()
                server.login(self.smtp_username, self.smtp_password)
                server.send_message(msg)

        # Run in thread pool to avoid blocking
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, send_sync)

    async def send_verification_code(self, to_email: str, code: str, resend: bool = False) -> bool:
        """Send an email verification code, logging it if delivery fails"""
        if resend:
            subject = f"{self.from_name} - New Verification Code"
            heading = "New Verification Code"
            footer = "If you didn't request this code, please ignore this email."
        else:
            subject = f"{self.from_name} - Email Verification"
            heading = f"Welcome to {self.from_name}!"
            footer = "If you didn't create this account, please ignore this email."

        html_content = f"""
        <h2>{heading}</h2>
        <p>Your verification code is: <strong>{code}</strong></p>
        <p>This code will expire in {settings.OTP_EXPIRE_MINUTES} minutes.</p>
        <p>{footer}</p>
        """
        text_content = (
            f"{heading}\n\nYour verification code is: {code}\n"
            f"This code will expire in {settings.OTP_EXPIRE_MINUTES} minutes.\n\n{footer}"
        )

        sent = await self.send_email(to_email, subject, html_content, text_content)
        if not sent:
            logger.warning("Development OTP for %s: %s", to_email, code)
        return sent

    def build_reset_url(self, reset_token: str) -> str:
        return f"{self.frontend_url.rstrip('/')}/reset-password?token={reset_token}"

    async def send_password_reset_email(self, to_email: str, reset_token: str) -> bool:
        """Send password reset email, logging the link if delivery fails"""
        reset_url = self.build_reset_url(reset_token)
        expires = settings.RESET_TOKEN_EXPIRE_MINUTES

        subject = f"{self.from_name} - Password Reset"

        html_content = f"""
        <h2>Password Reset Request</h2>
        <p>Click the link below to reset your password:</p>
        <a href="{reset_url}">Reset Password</a>
        <p>This link will expire in {expires} minutes.</p>
        <p>If you didn't request this reset, please ignore this email.</p>
        """

        text_content = f"""
        Password Reset Request

        We received a request to reset your {self.from_name} password.

        Click this link to reset your password:
        {reset_url}

        This link will expire in {expires} minutes.

        If you didn't request this reset, you can safely ignore this email.
        """

        sent = await self.send_email(to_email, subject, html_content, text_content)
        if not sent:
            logger.warning("Development password reset link for %s: %s", to_email, reset_url)
        return sent
