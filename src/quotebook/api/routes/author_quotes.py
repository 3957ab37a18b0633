"""
Combined author + quote creation route
"""

from fastapi import APIRouter, Depends

from quotebook.models.quote import AuthorQuoteCreateRequest, AuthorQuoteResponse
from quotebook.services.author_quotes_service import AuthorQuotesService, get_author_quotes_service
from quotebook.utils.helpers import raise_for_result

router = APIRouter()

@router.post("", response_model=AuthorQuoteResponse, status_code=201)
async def create_author_quote(
    request: AuthorQuoteCreateRequest,
    author_quotes_service: AuthorQuotesService = Depends(get_author_quotes_service)
):
    """Create a new author together with one quote, atomically"""
    result = await author_quotes_service.create_author_with_quote(
        author_name=request.author,
        quote_text=request.quote
    )
    raise_for_result(result)
    return result.data[0]
