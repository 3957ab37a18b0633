"""
Author API routes
"""

from typing import List
from fastapi import APIRouter, Depends, Query

from quotebook.models.author import Author, AuthorCreateRequest
from quotebook.services.authors_service import AuthorsService, get_authors_service
from quotebook.utils.helpers import raise_for_result

router = APIRouter()

@router.get("", response_model=List[Author])
async def search_authors(
    query: str = Query("", description="Substring to look for in author names"),
    authors_service: AuthorsService = Depends(get_authors_service)
):
    """Search authors by name substring; 404 when nothing matches"""
    result = await authors_service.search_authors(query)
    raise_for_result(result)
    return result.data

@router.post("", response_model=Author, status_code=201)
async def create_author(
    request: AuthorCreateRequest,
    authors_service: AuthorsService = Depends(get_authors_service)
):
    """Create an author without quotes"""
    result = await authors_service.create_author(request.name)
    raise_for_result(result)
    return result.data[0]

@router.get("/{author_id}", response_model=Author)
async def get_author(
    author_id: int,
    authors_service: AuthorsService = Depends(get_authors_service)
):
    """Get one author by id"""
    result = await authors_service.get_author_by_id(author_id)
    raise_for_result(result)
    return result.data[0]
