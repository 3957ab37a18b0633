"""
Utility functions and helpers
"""

from fastapi import HTTPException

from quotebook.models.enums import ErrorType
from quotebook.services.base_service import ServiceResult


# Status code for each service failure type
ERROR_STATUS_CODES = {
    ErrorType.VALIDATION_ERROR: 400,
    ErrorType.FOREIGN_KEY_ERROR: 400,
    ErrorType.NOT_FOUND: 404,
    ErrorType.DATABASE_ERROR: 500,
}

def raise_for_result(result: ServiceResult) -> None:
    """Raise the HTTPException matching a failed ServiceResult; no-op on success"""
    if result.success:
        return
    status_code = ERROR_STATUS_CODES.get(result.error_type, 500)
    raise HTTPException(status_code=status_code, detail=result.error)
