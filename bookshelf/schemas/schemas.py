from typing import List, Optional

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True
        # Numbers sent for text fields are stored as text
        coerce_numbers_to_str = True


# Book schemas
class BookBase(CamelModel):
    title: Optional[str] = None
    content: Optional[str] = None


class BookCreate(BookBase):
    pass


class BookUpdate(BookBase):
    """Only title and content can change; anything else in the body is ignored."""


class BookResponse(BookBase):
    id: int
    created_at: int
    updated_at: int


# Chapter schemas
class ChapterBase(CamelModel):
    title: Optional[str] = None
    content: Optional[str] = None


class ChapterCreate(ChapterBase):
    pass


class ChapterUpdate(ChapterBase):
    book_id: Optional[int] = None


class ChapterResponse(ChapterBase):
    id: int
    book_id: int
    created_at: int
    updated_at: int


class BookWithChaptersResponse(BookResponse):
    chapters: List[ChapterResponse] = []


class MessageResponse(BaseModel):
    message: str
    id: Optional[int] = None
