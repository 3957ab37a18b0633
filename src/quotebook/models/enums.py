"""
Enum definitions for the Quotebook API
"""

from enum import Enum

class ErrorType(str, Enum):
    """
    Failure categories returned by the service layer.

    - VALIDATION_ERROR: input rejected before or by the database (HTTP 400)
    - FOREIGN_KEY_ERROR: quote references a missing author (HTTP 400)
    - NOT_FOUND: lookup or search produced no rows (HTTP 404)
    - DATABASE_ERROR: database unreachable or failed unexpectedly (HTTP 500)
    """
    VALIDATION_ERROR = "VALIDATION_ERROR"
    FOREIGN_KEY_ERROR = "FOREIGN_KEY_ERROR"
    NOT_FOUND = "NOT_FOUND"
    DATABASE_ERROR = "DATABASE_ERROR"
