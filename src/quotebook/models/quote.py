"""
Quote-related Pydantic models
"""

from pydantic import BaseModel, Field, validator

from quotebook.models.author import Author, clean_author_name

class Quote(BaseModel):
    id: int
    quote: str
    author_id: int


class AuthorQuoteCreateRequest(BaseModel):
    """Request body for creating an author together with one quote"""
    author: str = Field(..., description="Author name (max 50 characters, surrounding whitespace ignored)")
    quote: str = Field(..., description="Quote text")

    @validator('author')
    def validate_author(cls, v):
        return clean_author_name(v, 'author')

    @validator('quote')
    def validate_quote(cls, v):
        if not v or not v.strip():
            raise ValueError('quote cannot be empty')
        return v.strip()


class AuthorQuoteResponse(BaseModel):
    author: Author
    quote: Quote
