"""
Pydantic schemas for book records.

Field names are camelCase because they are part of both the HTTP
contract and the persisted JSON layout.  Every payload field is
optional at the schema level: the two checks the service enforces
(name present, ``readPage`` not above ``pageCount``) produce their own
messages in ``BookService`` instead of a generic validation error.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class BookPayload(BaseModel):
    """Request body for creating or replacing a book."""

    name: Optional[str] = Field(None, description="Title of the book; required by the service")
    year: Optional[int] = None
    author: Optional[str] = None
    summary: Optional[str] = None
    publisher: Optional[str] = None
    pageCount: Optional[int] = Field(None, description="Total number of pages")
    readPage: Optional[int] = Field(None, description="Last page read; may not exceed pageCount")
    reading: Optional[bool] = Field(None, description="Whether the book is currently being read")


class Book(BaseModel):
    """A stored book record.

    Fields are declared in the order they are persisted.  Every field
    has a default and unknown keys are kept, so records written by an
    older version of the service still load and are saved back intact.
    """

    model_config = ConfigDict(extra="allow")

    id: Optional[str] = None
    name: Optional[str] = None
    year: Optional[int] = None
    author: Optional[str] = None
    summary: Optional[str] = None
    publisher: Optional[str] = None
    pageCount: Optional[int] = None
    readPage: Optional[int] = None
    finished: Optional[bool] = None
    reading: Optional[bool] = None
    insertedAt: Optional[str] = None
    updatedAt: Optional[str] = None


class BookSummary(BaseModel):
    """Projection of a book returned by the list endpoint."""

    id: Optional[str] = None
    name: Optional[str] = None
    publisher: Optional[str] = None


class BookIdData(BaseModel):
    bookId: str


class BookData(BaseModel):
    book: Book


class BookListData(BaseModel):
    books: List[BookSummary]


class MessageResponse(BaseModel):
    """Envelope carrying only a status and a message."""

    status: str = "success"
    message: str


class BookCreatedResponse(MessageResponse):
    data: BookIdData


class BookResponse(BaseModel):
    status: str = "success"
    data: BookData


class BookListResponse(BaseModel):
    status: str = "success"
    data: BookListData
