"""
RSVP-related Pydantic schemas
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

MAX_PARTY_SIZE = 1000

class RSVPCreate(BaseModel):
    """Incoming RSVP submission.

    Required fields are optional here so that missing values are reported by
    the RSVP service with a single explanatory message instead of a schema
    error per field.
    """
    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    attending: Optional[str] = None
    adults: Optional[int] = Field(default=None, ge=0, le=MAX_PARTY_SIZE)
    children: Optional[int] = Field(default=None, ge=0, le=MAX_PARTY_SIZE)
    dietary: Optional[str] = None
    song: Optional[str] = None
    message: Optional[str] = None

    @field_validator("adults", "children", mode="before")
    @classmethod
    def blank_count_is_missing(cls, value):
        # HTML forms post "" for an untouched number input
        if isinstance(value, str) and not value.strip():
            return None
        return value

class RSVPResponse(BaseModel):
    """Stored RSVP record"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    phone: Optional[str] = None
    attending: str
    adults: Optional[int] = None
    children: Optional[int] = None
    dietary: Optional[str] = None
    song: Optional[str] = None
    message: Optional[str] = None
    created_at: Optional[datetime] = None

class RSVPStats(BaseModel):
    """Aggregate RSVP counts; guest totals only include attending responses"""
    total: int = 0
    attending: int = 0
    not_attending: int = 0
    total_adults: int = 0
    total_children: int = 0
