"""
Application error types
"""

from typing import List, Optional


class RSVPError(Exception):
    """Base class for application errors"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(RSVPError):
    """A submission is missing required fields"""

    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []


class StorageError(RSVPError):
    """The RSVP store could not complete a read or write"""


class NotificationError(RSVPError):
    """Base class for email failures"""


class ConfigurationError(NotificationError):
    """Email credentials are missing from the configuration"""


class DeliveryError(NotificationError):
    """The mail transport rejected or failed to send a message"""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause
