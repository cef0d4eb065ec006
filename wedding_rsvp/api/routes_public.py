"""
Public API routes - health and email diagnostics
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from wedding_rsvp.core.errors import ConfigurationError, DeliveryError
from wedding_rsvp.schemas.common import HealthResponse, EmailCheckResponse
from wedding_rsvp.api.dependencies import get_email_service
from wedding_rsvp.services.email_service import EmailService
from wedding_rsvp.utils.responses import success_response, error_response

router = APIRouter()

MISSING_CREDENTIALS_HINT = "Set EMAIL_USER and EMAIL_PASSWORD in the environment or .env file and restart the server"
DELIVERY_HINT = "Check SMTP_HOST/SMTP_PORT and the credentials; Gmail accounts need an app password"

@router.get("/health", response_model=HealthResponse)
async def health_check(email_service: EmailService = Depends(get_email_service)):
    """Health check endpoint"""
    return HealthResponse(
        status="ok",
        timestamp=datetime.now(timezone.utc),
        emailConfigured=email_service.configured
    )

@router.get("/api/test-email")
def send_test_email(email_service: EmailService = Depends(get_email_service)):
    """Send a test message to the configured sender address"""
    try:
        message_id = email_service.send_test_message()
    except ConfigurationError as e:
        return error_response(e.message, hint=MISSING_CREDENTIALS_HINT, status_code=500)
    except DeliveryError as e:
        return error_response(e.message, hint=DELIVERY_HINT, status_code=500)

    return success_response(
        EmailCheckResponse(
            success=True,
            message=f"Test email sent to {email_service.config.sender_address}",
            messageId=message_id,
            sender=email_service.sender
        )
    )
