"""
Pydantic schemas package
"""

from .common import *
from .rsvp import *

__all__ = [
    "StandardResponse",
    "SubmitResponse",
    "ErrorResponse",
    "HealthResponse",
    "EmailCheckResponse",
    "RSVPCreate",
    "RSVPResponse",
    "RSVPStats",
]
