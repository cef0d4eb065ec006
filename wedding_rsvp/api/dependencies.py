"""
Request dependencies resolving the handles built at startup
"""

from fastapi import Request

from wedding_rsvp.services.email_service import EmailService
from wedding_rsvp.services.rsvp_service import RSVPService
from wedding_rsvp.services.rsvp_store import RSVPStore


def get_store(request: Request) -> RSVPStore:
    return request.app.state.store


def get_email_service(request: Request) -> EmailService:
    return request.app.state.email_service


def get_rsvp_service(request: Request) -> RSVPService:
    return RSVPService(get_store(request), get_email_service(request))
