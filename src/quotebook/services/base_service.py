"""
Base service layer: pooled connection access and typed failure results
"""

import logging
from typing import Any, List, Optional
from dataclasses import dataclass

import asyncpg

from quotebook.config.settings import SEARCH_CASE_SENSITIVE
from quotebook.database.connection import get_db_pool
from quotebook.models.enums import ErrorType

logger = logging.getLogger(__name__)

@dataclass
class ServiceResult:
    """Result from service operation"""
    success: bool
    data: Optional[List[Any]] = None
    error: Optional[str] = None
    error_type: Optional[ErrorType] = None

    @classmethod
    def ok(cls, data: List[Any]) -> "ServiceResult":
        return cls(success=True, data=data)

    @classmethod
    def failure(cls, error_type: ErrorType, error: str) -> "ServiceResult":
        return cls(success=False, error=error, error_type=error_type)


class BaseService:
    """Shared plumbing for services that talk to the database pool"""

    def __init__(self, resource_name: str, case_sensitive: Optional[bool] = None):
        self.resource_name = resource_name
        self.case_sensitive = SEARCH_CASE_SENSITIVE if case_sensitive is None else case_sensitive
        logger.info(f"{type(self).__name__} initialized for resource: {resource_name}")

    def _get_pool(self):
        db_pool = get_db_pool()
        if not db_pool:
            raise RuntimeError("Database pool not initialized")
        return db_pool

    def _error_result(self, operation: str, exc: Exception) -> ServiceResult:
        """
        Translate a database exception into a typed failure

        Args:
            operation: Name of the operation, used for server-side logs
            exc: The exception raised by asyncpg or the pool

        Returns:
            ServiceResult with success=False and an ErrorType
        """
        if isinstance(exc, asyncpg.ForeignKeyViolationError):
            logger.warning(f"{operation} on {self.resource_name}: foreign key violation: {exc}")
            return ServiceResult.failure(ErrorType.FOREIGN_KEY_ERROR, "Referenced author not found")

        if isinstance(exc, (asyncpg.DataError, asyncpg.IntegrityConstraintViolationError)):
            logger.warning(f"{operation} on {self.resource_name}: rejected by database: {exc}")
            return ServiceResult.failure(ErrorType.VALIDATION_ERROR, "Invalid data rejected by the database")

        # Connectivity problems and anything unexpected: full details stay in the logs
        logger.error(f"{operation} on {self.resource_name} failed: {type(exc).__name__}: {exc}", exc_info=True)
        return ServiceResult.failure(ErrorType.DATABASE_ERROR, f"Database operation failed: {operation}")
