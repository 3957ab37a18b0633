"""
Quote API routes, nested under an author
"""

from typing import List
from fastapi import APIRouter, Depends, Query

from quotebook.services.quotes_service import QuotesService, get_quotes_service
from quotebook.utils.helpers import raise_for_result

router = APIRouter()

@router.get("/{author_id}/quotes", response_model=List[str])
async def search_author_quotes(
    author_id: int,
    query: str = Query("", description="Substring to look for in quote texts"),
    quotes_service: QuotesService = Depends(get_quotes_service)
):
    """Quote texts of one author containing the query substring"""
    result = await quotes_service.search_author_quotes(author_id, query)
    raise_for_result(result)
    return result.data
