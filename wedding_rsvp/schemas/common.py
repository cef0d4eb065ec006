"""
Common Pydantic schemas
"""

from datetime import datetime
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field

class StandardResponse(BaseModel):
    """Standard API response"""
    success: bool
    message: str

class SubmitResponse(StandardResponse):
    """Response to an RSVP submission"""
    id: int
    emailSent: bool
    warning: Optional[str] = None

class ErrorResponse(BaseModel):
    """Error response schema"""
    success: bool = False
    error: str
    details: Optional[Any] = None
    hint: Optional[str] = None

class HealthResponse(BaseModel):
    """Liveness signal with the email capability flag"""
    status: str = "ok"
    timestamp: datetime
    emailConfigured: bool

class EmailCheckResponse(StandardResponse):
    """Result of the diagnostic test email"""
    model_config = ConfigDict(populate_by_name=True)

    messageId: str
    sender: str = Field(alias="from")
