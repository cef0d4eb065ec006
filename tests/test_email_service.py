"""
Tests for confirmation email composition and delivery
"""

import pytest

from wedding_rsvp.core.errors import ConfigurationError, DeliveryError
from wedding_rsvp.services.email_service import EmailService, describe_party, parse_count
from conftest import make_settings

def html_body(message):
    return message.get_body(preferencelist=("html",)).get_content()

def text_body(message):
    return message.get_body(preferencelist=("plain",)).get_content()

@pytest.mark.parametrize("adults,children,expected", [
    (1, 0, "1 (1 adult)"),
    (2, 0, "2 (2 adults)"),
    (2, 1, "3 (2 adults, 1 child)"),
    (1, 3, "4 (1 adult, 3 children)"),
    (0, 0, "0 (0 adults)"),
    (0, 2, "2 (0 adults, 2 children)"),
])
def test_describe_party(adults, children, expected):
    assert describe_party(adults, children) == expected

def test_parse_count_defaults():
    assert parse_count(None, 1) == 1
    assert parse_count("", 0) == 0
    assert parse_count("three", 1) == 1
    assert parse_count("2", 1) == 2
    assert parse_count(0, 1) == 0

def test_attending_confirmation(email_service, transport):
    message_id = email_service.send_confirmation(
        name="Jane Smith", email="jane@example.com", attending="yes", adults=2, children=1
    )

    assert len(transport.sent) == 1
    message = transport.sent[0]
    assert message["Message-ID"] == message_id
    assert message["To"] == "jane@example.com"
    assert message["Subject"] == "✓ RSVP Confirmed - Sarah & Michael's Wedding"
    assert "couple@example.com" in message["From"]
    assert "Sarah & Michael" in message["From"]

    html = html_body(message)
    assert "We Can&#39;t Wait to See You!" in html
    assert "Number of Guests: 3 (2 adults, 1 child)" in html
    assert "Dear Jane Smith," in html
    assert "Number of Guests: 3 (2 adults, 1 child)" in text_body(message)

def test_attending_confirmation_defaults_missing_counts(email_service, transport):
    email_service.send_confirmation(name="Solo Guest", email="solo@example.com", attending="yes")

    assert "Number of Guests: 1 (1 adult)" in text_body(transport.sent[0])

def test_declined_confirmation(email_service, transport):
    email_service.send_confirmation(name="Bob Johnson", email="bob@example.com", attending="no", adults=3)

    message = transport.sent[0]
    assert message["Subject"] == "RSVP Received - Sarah & Michael's Wedding"
    html = html_body(message)
    assert "Thank You for Your Response" in html
    assert "sorry you won't be able to join us" in html
    assert "Number of Guests" not in html

def test_guest_name_is_escaped(email_service, transport):
    email_service.send_confirmation(name="<b>Mallory</b>", email="m@example.com", attending="no")

    html = html_body(transport.sent[0])
    assert "<b>Mallory</b>" not in html
    assert "&lt;b&gt;Mallory&lt;/b&gt;" in html

def test_wedding_details_come_from_settings(transport):
    settings = make_settings(COUPLE_NAMES="Ana & Luis", WEDDING_DATE="May 2, 2027", CONTACT_EMAIL="hola@example.com")
    service = EmailService.from_settings(settings, transport=transport)

    service.send_confirmation(name="Guest", email="guest@example.com", attending="yes")

    message = transport.sent[0]
    assert message["Subject"] == "✓ RSVP Confirmed - Ana & Luis's Wedding"
    html = html_body(message)
    assert "MAY 2, 2027" in html
    assert "mailto:hola@example.com" in html

def test_missing_credentials_raise_configuration_error(transport):
    service = EmailService.from_settings(make_settings(EMAIL_USER=None, EMAIL_PASSWORD=None), transport=transport)

    assert service.configured is False
    with pytest.raises(ConfigurationError):
        service.send_confirmation(name="Guest", email="guest@example.com", attending="yes")
    with pytest.raises(ConfigurationError):
        service.send_test_message()
    assert transport.sent == []

def test_transport_failure_raises_delivery_error(settings, failing_transport):
    service = EmailService.from_settings(settings, transport=failing_transport)

    with pytest.raises(DeliveryError) as excinfo:
        service.send_confirmation(name="Guest", email="guest@example.com", attending="yes")
    assert excinfo.value.cause is not None
    assert not isinstance(excinfo.value, ConfigurationError)

def test_test_message_goes_to_sender(email_service, transport):
    message_id = email_service.send_test_message()

    message = transport.sent[0]
    assert message["To"] == "couple@example.com"
    assert message["Message-ID"] == message_id
    assert "outgoing email is configured correctly" in message.get_content()

def test_verify_configuration(email_service, transport):
    assert email_service.verify_configuration() is True
    assert transport.verified

def test_verify_configuration_never_raises(settings, failing_transport):
    service = EmailService.from_settings(settings, transport=failing_transport)
    assert service.verify_configuration() is False

    unconfigured = EmailService.from_settings(make_settings(EMAIL_PASSWORD=""))
    assert unconfigured.verify_configuration() is False
    assert unconfigured.transport is None

def test_test_message_with_malformed_sender_config(transport):
    settings = make_settings(COUPLE_NAMES="Ana\nBcc: everyone@example.com")
    service = EmailService.from_settings(settings, transport=transport)

    with pytest.raises(DeliveryError):
        service.send_test_message()
    assert transport.sent == []
