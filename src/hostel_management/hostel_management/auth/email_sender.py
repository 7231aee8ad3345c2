from __future__ import annotations

import logging
import smtplib
from dataclasses import dataclass
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from typing import Optional, Protocol

from ..core.constants import OTP_EXPIRY_MINUTES

logger = logging.getLogger(__name__)

OTP_SUBJECT = "Verify Your Email - Hostel Management System"


def render_otp_email(*, name: str, otp: str, expiry_minutes: int = OTP_EXPIRY_MINUTES) -> str:
    return f"""
    <html>
      <body style="font-family: Arial, sans-serif; line-height: 1.6; color: #333;">
        <h1>Email Verification</h1>
        <p>Hello {name},</p>
        <p>Thank you for registering with the Hostel Management System. To complete your
        registration, please use the following One-Time Password (OTP):</p>
        <p style="font-size: 32px; font-weight: bold; letter-spacing: 8px;">{otp}</p>
        <ul>
          <li>This OTP is valid for <strong>{expiry_minutes} minutes</strong></li>
          <li>Do not share this code with anyone</li>
          <li>If you didn't request this, please ignore this email</li>
        </ul>
        <p>Best regards,<br>Hostel Management Team</p>
      </body>
    </html>
    """


class EmailSender(Protocol):
    def send_otp(self, *, email: str, otp: str, name: str) -> bool:
        """Return False when the message could not be delivered."""

        raise NotImplementedError


@dataclass(frozen=True)
class SMTPSettings:
    host: str
    port: int
    user: str
    password: str
    sender: str
    timeout: int = 15


class SMTPEmailSender(EmailSender):
    def __init__(self, settings: SMTPSettings, *, expiry_minutes: int = OTP_EXPIRY_MINUTES):
        self._settings = settings
        self._expiry_minutes = expiry_minutes

    def _message(self, *, to_email: str, subject: str, html: str) -> MIMEMultipart:
        msg = MIMEMultipart()
        msg["From"] = self._settings.sender
        msg["To"] = to_email
        msg["Subject"] = subject
        msg.attach(MIMEText(html, "html"))
        return msg

    def send_otp(self, *, email: str, otp: str, name: str) -> bool:
        s = self._settings
        msg = self._message(
            to_email=email,
            subject=OTP_SUBJECT,
            html=render_otp_email(name=name, otp=otp, expiry_minutes=self._expiry_minutes),
        )
        try:
            with smtplib.SMTP(s.host, s.port, timeout=s.timeout) as server:
                server.starttls()
                if s.user:
                    server.login(s.user, s.password)
                server.send_message(msg)
            return True
        except (smtplib.SMTPException, OSError) as e:
            logger.error("Failed to send OTP email to %s: %s", email, e)
            return False


class LoggingEmailSender(EmailSender):
    """Used when no SMTP host is configured: the OTP only goes to the log."""

    def send_otp(self, *, email: str, otp: str, name: str) -> bool:
        logger.warning("Email simulation: OTP for %s (%s) is %s", email, name, otp)
        return True


def build_email_sender(
    *,
    host: Optional[str],
    port: int,
    user: str,
    password: str,
    sender: str,
    expiry_minutes: int = OTP_EXPIRY_MINUTES,
) -> EmailSender:
    if not host:
        return LoggingEmailSender()
    return SMTPEmailSender(
        SMTPSettings(host=host, port=int(port), user=user, password=password, sender=sender),
        expiry_minutes=expiry_minutes,
    )
