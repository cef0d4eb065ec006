"""
Confirmation email composition and SMTP delivery
"""

from __future__ import annotations

import logging
import os
import smtplib
from email.message import EmailMessage
from email.utils import formataddr, make_msgid
from typing import Any, Optional, Protocol

import jinja2

from wedding_rsvp.core.config import MailConfig, Settings
from wedding_rsvp.core.errors import ConfigurationError, DeliveryError

logger = logging.getLogger(__name__)

TEMPLATES_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "templates", "email")

env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(TEMPLATES_DIR),
    autoescape=jinja2.select_autoescape(["html"]),
)


class MailTransport(Protocol):
    def send(self, message: EmailMessage) -> None: ...

    def verify(self) -> None: ...


class SMTPTransport:
    """Sends messages through an authenticated SMTP server"""

    def __init__(self, config: MailConfig):
        self.config = config

    def _connect(self) -> smtplib.SMTP:
        if self.config.smtp_port == 465:
            return smtplib.SMTP_SSL(self.config.smtp_host, self.config.smtp_port, timeout=self.config.timeout)
        server = smtplib.SMTP(self.config.smtp_host, self.config.smtp_port, timeout=self.config.timeout)
        server.starttls()
        return server

    def send(self, message: EmailMessage) -> None:
        with self._connect() as server:
            server.login(self.config.sender_address, self.config.password)
            server.send_message(message)

    def verify(self) -> None:
        """Connect and authenticate without sending anything"""
        with self._connect() as server:
            server.login(self.config.sender_address, self.config.password)


def parse_count(value: Any, default: int) -> int:
    """Read a party size from possibly missing or malformed input"""
    if value is None or value == "":
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def describe_party(adults: int, children: int) -> str:
    summary = f"{adults + children} ({adults} adult{'s' if adults != 1 else ''}"
    if children > 0:
        summary += f", {children} child{'ren' if children > 1 else ''}"
    return summary + ")"


class EmailService:
    """Best-effort confirmation emails for RSVP submissions"""

    def __init__(
        self,
        config: MailConfig,
        transport: Optional[MailTransport] = None,
        couple: str = "Sarah & Michael",
        wedding_date: str = "June 15, 2026",
        contact_email: str = "wedding@sarahandmichael.com",
    ):
        self.config = config
        self.couple = couple
        self.wedding_date = wedding_date
        self.contact_email = contact_email
        if transport is None and config.available:
            transport = SMTPTransport(config)
        self.transport = transport

    @classmethod
    def from_settings(cls, settings: Settings, transport: Optional[MailTransport] = None) -> "EmailService":
        return cls(
            settings.mail_config(),
            transport=transport,
            couple=settings.COUPLE_NAMES,
            wedding_date=settings.WEDDING_DATE,
            contact_email=settings.CONTACT_EMAIL,
        )

    @property
    def configured(self) -> bool:
        return self.config.available

    @property
    def sender(self) -> str:
        return formataddr((self.config.from_name, self.config.sender_address))

    def _require_configuration(self) -> None:
        if not self.config.available or self.transport is None:
            raise ConfigurationError("Email credentials are not configured")

    def _build_message(self, to: str, subject: str, text: str, html: Optional[str] = None) -> EmailMessage:
        message = EmailMessage()
        message["From"] = self.sender
        message["To"] = to
        message["Subject"] = subject
        domain = self.config.sender_address.rpartition("@")[2] or None
        message["Message-ID"] = make_msgid(domain=domain)
        message.set_content(text)
        if html is not None:
            message.add_alternative(html, subtype="html")
        return message

    def _deliver(self, message: EmailMessage) -> str:
        try:
            self.transport.send(message)
        except Exception as e:
            logger.error(f"Failed to send email to {message['To']}: {e}")
            raise DeliveryError(f"Failed to send email: {e}", cause=e) from e
        logger.info(f"Email sent to {message['To']} ({message['Message-ID']})")
        return message["Message-ID"]

    def render_confirmation(self, name: str, attending: str, adults: Any = None, children: Any = None) -> dict:
        """Subject, text and HTML bodies of a confirmation email"""
        is_attending = attending == "yes"
        adult_count = parse_count(adults, 1)
        child_count = parse_count(children, 0)
        context = {
            "name": name,
            "couple": self.couple,
            "wedding_date": self.wedding_date,
            "contact_email": self.contact_email,
            "is_attending": is_attending,
            "heading": "We Can't Wait to See You!" if is_attending else "Thank You for Your Response",
            "guest_summary": describe_party(adult_count, child_count),
        }
        if is_attending:
            subject = f"✓ RSVP Confirmed - {self.couple}'s Wedding"
        else:
            subject = f"RSVP Received - {self.couple}'s Wedding"
        return {
            "subject": subject,
            "text": env.get_template("rsvp_confirmation.txt").render(context),
            "html": env.get_template("rsvp_confirmation.html").render(context),
        }

    def send_confirmation(
        self, name: str, email: str, attending: str, adults: Any = None, children: Any = None
    ) -> str:
        """Send the RSVP confirmation and return its Message-ID.

        Raises ConfigurationError when no credentials are set and DeliveryError
        when the transport fails.
        """
        self._require_configuration()
        content = self.render_confirmation(name, attending, adults, children)
        try:
            message = self._build_message(email, content["subject"], content["text"], content["html"])
        except ValueError as e:
            logger.error(f"Cannot address email to {email!r}: {e}")
            raise DeliveryError(f"Invalid recipient address: {email}", cause=e) from e
        return self._deliver(message)

    def send_test_message(self) -> str:
        """Send a short message to the sender's own address"""
        self._require_configuration()
        text = env.get_template("test_message.txt").render(couple=self.couple)
        try:
            message = self._build_message(
                self.config.sender_address, f"Test Email - {self.couple}'s Wedding RSVP", text
            )
        except ValueError as e:
            logger.error(f"Cannot build test email from {self.config.sender_address!r}: {e}")
            raise DeliveryError(f"Invalid sender configuration: {e}", cause=e) from e
        return self._deliver(message)

    def verify_configuration(self) -> bool:
        """Check credentials once at startup; never blocks startup"""
        if not self.configured:
            logger.warning("Email not configured: set EMAIL_USER and EMAIL_PASSWORD to send confirmations")
            return False
        try:
            self.transport.verify()
        except Exception as e:
            logger.error(f"Email configuration error: {e}")
            return False
        logger.info(f"Email server is ready to send messages as {self.config.sender_address}")
        return True
