"""
Author-related Pydantic models
"""

from pydantic import BaseModel, Field, validator

AUTHOR_NAME_MAX_LENGTH = 50

class Author(BaseModel):
    id: int
    name: str


def clean_author_name(v, field_name):
    """Strip an author name, then enforce the 1..50 character range"""
    if not v or not v.strip():
        raise ValueError(f'{field_name} cannot be empty')
    v = v.strip()
    if len(v) > AUTHOR_NAME_MAX_LENGTH:
        raise ValueError(f'{field_name} cannot exceed {AUTHOR_NAME_MAX_LENGTH} characters')
    return v


class AuthorCreateRequest(BaseModel):
    name: str = Field(..., description="Author name (max 50 characters, surrounding whitespace ignored)")

    @validator('name')
    def validate_name(cls, v):
        return clean_author_name(v, 'name')
