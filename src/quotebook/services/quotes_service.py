"""
Quotes service - searching the quotes of one author
"""

import logging
from typing import Optional

from quotebook.database import queries
from quotebook.models.enums import ErrorType
from quotebook.services.base_service import BaseService, ServiceResult

logger = logging.getLogger(__name__)

class QuotesService(BaseService):
    """Service for quote lookups"""

    def __init__(self, case_sensitive: Optional[bool] = None):
        super().__init__("quotes", case_sensitive)

    async def search_author_quotes(self, author_id: int, text: Optional[str]) -> ServiceResult:
        """
        Find quote texts of an author containing the given text

        Args:
            author_id: Id of the author
            text: Substring to look for; empty matches every quote

        Returns:
            ServiceResult with a list of quote strings. NOT_FOUND when the
            author does not exist or nothing matches.
        """
        try:
            async with self._get_pool().acquire() as conn:
                author = await queries.get_author_by_id(conn, author_id)
                if author is None:
                    return ServiceResult.failure(ErrorType.NOT_FOUND, f"Author {author_id} not found")

                quotes = await queries.find_quotes_by_author_and_pattern(
                    conn, author_id, queries.like_pattern(text), self.case_sensitive
                )
        except Exception as e:
            return self._error_result("search_author_quotes", e)

        if not quotes:
            return ServiceResult.failure(ErrorType.NOT_FOUND, "No quotes matched the query")
        return ServiceResult.ok(quotes)


# Global service instance
_quotes_service = None

def get_quotes_service() -> QuotesService:
    """Get the global quotes service instance"""
    global _quotes_service
    if _quotes_service is None:
        _quotes_service = QuotesService()
    return _quotes_service
