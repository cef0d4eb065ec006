"""
Shared fixtures: in-memory store, fake mail transport and app client
"""

import smtplib

import pytest
from fastapi.testclient import TestClient

from main import create_app
from wedding_rsvp.core.config import Settings
from wedding_rsvp.services.email_service import EmailService
from wedding_rsvp.services.rsvp_store import RSVPStore


class FakeTransport:
    """Records messages instead of talking to an SMTP server"""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.sent = []
        self.verified = False

    def send(self, message):
        if self.fail:
            raise smtplib.SMTPAuthenticationError(535, b"Username and Password not accepted")
        self.sent.append(message)

    def verify(self):
        if self.fail:
            raise smtplib.SMTPAuthenticationError(535, b"Username and Password not accepted")
        self.verified = True


def make_settings(**overrides) -> Settings:
    values = {
        "DATABASE_URL": "sqlite://",
        "STATIC_DIR": "does-not-exist",
        "EMAIL_USER": "couple@example.com",
        "EMAIL_PASSWORD": "app-password",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def store():
    """Fresh in-memory RSVP store"""
    rsvp_store = RSVPStore("sqlite://")
    rsvp_store.initialize()
    try:
        yield rsvp_store
    finally:
        rsvp_store.close()


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def failing_transport():
    return FakeTransport(fail=True)


@pytest.fixture
def email_service(settings, transport):
    return EmailService.from_settings(settings, transport=transport)


@pytest.fixture
def client(settings, store, email_service):
    app = create_app(settings=settings, store=store, email_service=email_service)
    with TestClient(app) as test_client:
        yield test_client
