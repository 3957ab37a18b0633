"""
Paths kept from the first version of the service

Hidden from the OpenAPI schema; they behave exactly like their
replacements.
"""

from typing import List
from fastapi import APIRouter, Depends

from quotebook.api.routes import author_quotes, authors
from quotebook.models.author import Author
from quotebook.models.quote import AuthorQuoteCreateRequest, AuthorQuoteResponse
from quotebook.services.author_quotes_service import AuthorQuotesService, get_author_quotes_service
from quotebook.services.authors_service import AuthorsService, get_authors_service

router = APIRouter(include_in_schema=False)

@router.get("/findautor/{text}", response_model=List[Author])
async def find_author(
    text: str,
    authors_service: AuthorsService = Depends(get_authors_service)
):
    """Alias of GET /authors?query=<text>"""
    return await authors.search_authors(query=text, authors_service=authors_service)

@router.post("/quoteauthor", response_model=AuthorQuoteResponse, status_code=201)
@router.post("/quoteauthor/", response_model=AuthorQuoteResponse, status_code=201)
async def quote_author(
    request: AuthorQuoteCreateRequest,
    author_quotes_service: AuthorQuotesService = Depends(get_author_quotes_service)
):
    """Alias of POST /authors-quotes"""
    return await author_quotes.create_author_quote(
        request=request, author_quotes_service=author_quotes_service
    )
