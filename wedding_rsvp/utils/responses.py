"""
Standardized response utilities
"""

from typing import Any, Optional
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from wedding_rsvp.schemas.common import StandardResponse, ErrorResponse

def success_response(
    response: StandardResponse,
    status_code: int = 200
) -> JSONResponse:
    """Create standardized success response"""
    return JSONResponse(
        content=response.model_dump(mode="json", by_alias=True, exclude_none=True),
        status_code=status_code
    )

def error_response(
    error: str,
    details: Any = None,
    hint: Optional[str] = None,
    status_code: int = 400
) -> JSONResponse:
    """Create standardized error response"""
    response = ErrorResponse(
        error=error,
        details=details,
        hint=hint
    )
    return JSONResponse(
        content=response.model_dump(mode="json", exclude_none=True),
        status_code=status_code
    )

def server_error(error: str) -> JSONResponse:
    """Create internal server error response"""
    return error_response(error, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed request bodies as a plain 400"""
    details = [
        {"field": ".".join(str(part) for part in err["loc"] if part != "body"), "message": err["msg"]}
        for err in exc.errors()
    ]
    return error_response(
        "Invalid RSVP submission",
        details=details,
        status_code=status.HTTP_400_BAD_REQUEST
    )
