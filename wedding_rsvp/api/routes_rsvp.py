"""
RSVP API routes
"""

from typing import List

from fastapi import APIRouter, Depends, status

from wedding_rsvp.core.errors import StorageError, ValidationError
from wedding_rsvp.schemas.common import SubmitResponse
from wedding_rsvp.schemas.rsvp import RSVPCreate, RSVPResponse, RSVPStats
from wedding_rsvp.api.dependencies import get_rsvp_service, get_store
from wedding_rsvp.services.rsvp_service import RSVPService
from wedding_rsvp.services.rsvp_store import RSVPStore
from wedding_rsvp.utils.responses import success_response, error_response, server_error

router = APIRouter()

@router.post("/rsvp", response_model=SubmitResponse)
def submit_rsvp(
    payload: RSVPCreate,
    rsvp_service: RSVPService = Depends(get_rsvp_service)
):
    """Store an RSVP and send the confirmation email"""
    try:
        result = rsvp_service.submit(payload)
    except ValidationError as e:
        return error_response(
            e.message,
            details={"missing": e.missing_fields},
            status_code=status.HTTP_400_BAD_REQUEST
        )
    except StorageError as e:
        return server_error(e.message)

    if result.notified:
        response = SubmitResponse(
            success=True,
            message="RSVP received successfully",
            id=result.rsvp_id,
            emailSent=True
        )
    else:
        response = SubmitResponse(
            success=True,
            message="RSVP received (email notification failed)",
            id=result.rsvp_id,
            emailSent=False,
            warning=f"Confirmation email could not be sent: {result.notify_error}"
        )
    return success_response(response)

@router.get("/rsvps", response_model=List[RSVPResponse])
def list_rsvps(store: RSVPStore = Depends(get_store)):
    """All RSVPs, most recent first (admin view)"""
    try:
        return store.list_all()
    except StorageError as e:
        return server_error(e.message)

@router.get("/rsvp-stats", response_model=RSVPStats)
def rsvp_stats(store: RSVPStore = Depends(get_store)):
    """Response counts and confirmed guest totals"""
    try:
        return store.aggregate_stats()
    except StorageError as e:
        return server_error(e.message)
