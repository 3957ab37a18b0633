"""
Author + quote creation

Both rows are written inside one transaction on one pooled connection.
The quote's author_id comes from the author insert's RETURNING row, so
concurrent requests can never pick up each other's ids, and a failed
quote insert rolls the author back with it.
"""

import logging
from typing import Optional

from quotebook.database import queries
from quotebook.models.enums import ErrorType
from quotebook.services.authors_service import validate_author_name
from quotebook.services.base_service import BaseService, ServiceResult

logger = logging.getLogger(__name__)

class AuthorQuotesService(BaseService):
    """Service for the combined author/quote write"""

    def __init__(self):
        super().__init__("authors_quotes")

    async def create_author_with_quote(
        self,
        author_name: Optional[str],
        quote_text: Optional[str]
    ) -> ServiceResult:
        """
        Create an author and its first quote atomically

        Args:
            author_name: Author name, 1 to 50 characters
            quote_text: Quote text, non-blank

        Returns:
            ServiceResult whose single item is {"author": {...}, "quote": {...}}
        """
        error = validate_author_name(author_name)
        if error is None and (not quote_text or not quote_text.strip()):
            error = "Quote text is required"
        if error:
            return ServiceResult.failure(ErrorType.VALIDATION_ERROR, error)

        try:
            async with self._get_pool().acquire() as conn:
                async with conn.transaction():
                    author = await queries.insert_author(conn, author_name.strip())
                    quote = await queries.insert_quote(conn, quote_text.strip(), author["id"])
        except Exception as e:
            # conn.transaction() has already rolled back the author insert
            return self._error_result("create_author_with_quote", e)

        logger.info(f"Created author {author['id']} with quote {quote['id']}")
        return ServiceResult.ok([{"author": author, "quote": quote}])


# Global service instance
_author_quotes_service = None

def get_author_quotes_service() -> AuthorQuotesService:
    """Get the global author/quote service instance"""
    global _author_quotes_service
    if _author_quotes_service is None:
        _author_quotes_service = AuthorQuotesService()
    return _author_quotes_service
