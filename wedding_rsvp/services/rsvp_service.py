"""
RSVP submission flow: validate, persist, then notify
"""

import logging
from dataclasses import dataclass
from typing import Optional

from wedding_rsvp.core.errors import NotificationError, ValidationError
from wedding_rsvp.schemas.rsvp import RSVPCreate
from wedding_rsvp.services.email_service import EmailService
from wedding_rsvp.services.rsvp_store import RSVPStore

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "email", "attending")
OPTIONAL_TEXT_FIELDS = ("phone", "dietary", "song", "message")
KNOWN_ATTENDANCE = ("yes", "no")


@dataclass(frozen=True)
class SubmissionResult:
    """Outcome of a submission; the write stands even when notification fails"""
    rsvp_id: int
    notified: bool
    notify_error: Optional[str] = None
    persisted: bool = True


class RSVPService:
    """Service for accepting RSVP submissions"""

    def __init__(self, store: RSVPStore, email_service: EmailService):
        self.store = store
        self.email_service = email_service

    @staticmethod
    def normalize(payload: RSVPCreate) -> dict:
        """Strip text fields, turning blanks into None, and check required ones"""
        record = payload.model_dump()
        for field in REQUIRED_FIELDS + OPTIONAL_TEXT_FIELDS:
            value = record.get(field)
            if isinstance(value, str):
                value = value.strip()
            record[field] = value or None

        missing = [field for field in REQUIRED_FIELDS if not record[field]]
        if missing:
            raise ValidationError(
                "Name, email, and attendance status are required",
                missing_fields=missing,
            )
        return record

    def submit(self, payload: RSVPCreate) -> SubmissionResult:
        """Validate and store an RSVP, then try to send the confirmation email.

        ValidationError and StorageError propagate; email failures are reported
        on the result.
        """
        record = self.normalize(payload)
        if record["attending"] not in KNOWN_ATTENDANCE:
            logger.warning(f"Storing RSVP with unexpected attendance value: {record['attending']!r}")

        rsvp_id = self.store.insert(record)

        try:
            self.email_service.send_confirmation(
                name=record["name"],
                email=record["email"],
                attending=record["attending"],
                adults=record["adults"],
                children=record["children"],
            )
        except NotificationError as e:
            logger.error(f"Email error for RSVP {rsvp_id}: {e.message}")
            return SubmissionResult(rsvp_id=rsvp_id, notified=False, notify_error=e.message)

        return SubmissionResult(rsvp_id=rsvp_id, notified=True)
