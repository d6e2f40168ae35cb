"""
Standardized response utilities
"""

from typing import Any, Optional
from fastapi.responses import JSONResponse

from app.schemas.common import StandardResponse, ErrorResponse

def success_response(
    data: Any = None,
    message: Optional[str] = None,
    count: Optional[int] = None,
    status_code: int = 200
) -> JSONResponse:
    """Create standardized success response"""
    response = StandardResponse(
        success=True,
        message=message,
        count=count,
        data=data
    )
    return JSONResponse(
        content=response.model_dump(exclude_none=True),
        status_code=status_code
    )

def error_response(
    error: str,
    details: Any = None,
    status_code: int = 400
) -> JSONResponse:
    """Create standardized error response"""
    response = ErrorResponse(
        error=error,
        details=details
    )
    return JSONResponse(
        content=response.model_dump(exclude_none=True),
        status_code=status_code
    )
