"""
Authors service - author search and author-only creation
"""

import logging
from typing import Optional

from quotebook.database import queries
from quotebook.models.author import AUTHOR_NAME_MAX_LENGTH
from quotebook.models.enums import ErrorType
from quotebook.services.base_service import BaseService, ServiceResult

logger = logging.getLogger(__name__)

class AuthorsService(BaseService):
    """Service for author operations"""

    def __init__(self, case_sensitive: Optional[bool] = None):
        super().__init__("authors", case_sensitive)

    async def search_authors(self, text: Optional[str]) -> ServiceResult:
        """
        Find authors whose name contains the given text

        Args:
            text: Substring to look for; empty matches every author

        Returns:
            ServiceResult with {id, name} rows, or NOT_FOUND when none match
        """
        try:
            async with self._get_pool().acquire() as conn:
                rows = await queries.find_authors_by_pattern(
                    conn, queries.like_pattern(text), self.case_sensitive
                )
        except Exception as e:
            return self._error_result("search_authors", e)

        if not rows:
            return ServiceResult.failure(ErrorType.NOT_FOUND, "No authors matched the query")
        return ServiceResult.ok(rows)

    async def get_author_by_id(self, author_id: int) -> ServiceResult:
        try:
            async with self._get_pool().acquire() as conn:
                author = await queries.get_author_by_id(conn, author_id)
        except Exception as e:
            return self._error_result("get_author_by_id", e)

        if author is None:
            return ServiceResult.failure(ErrorType.NOT_FOUND, f"Author {author_id} not found")
        return ServiceResult.ok([author])

    async def create_author(self, name: Optional[str]) -> ServiceResult:
        """
        Create a single author

        Args:
            name: Author name, 1 to 50 characters

        Returns:
            ServiceResult with the stored {id, name} row
        """
        error = validate_author_name(name)
        if error:
            return ServiceResult.failure(ErrorType.VALIDATION_ERROR, error)

        logger.info("Creating new author")
        try:
            async with self._get_pool().acquire() as conn:
                async with conn.transaction():
                    author = await queries.insert_author(conn, name.strip())
        except Exception as e:
            return self._error_result("create_author", e)

        logger.info(f"Created author {author['id']}")
        return ServiceResult.ok([author])


def validate_author_name(name: Optional[str]) -> Optional[str]:
    """Return an error message for an unusable author name, None otherwise"""
    if not name or not name.strip():
        return "Author name is required"
    if len(name.strip()) > AUTHOR_NAME_MAX_LENGTH:
        return f"Author name cannot exceed {AUTHOR_NAME_MAX_LENGTH} characters"
    return None


# Global service instance
_authors_service = None

def get_authors_service() -> AuthorsService:
    """Get the global authors service instance"""
    global _authors_service
    if _authors_service is None:
        _authors_service = AuthorsService()
    return _authors_service
