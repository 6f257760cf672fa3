"""
Book endpoints.

These routes expose the CRUD API for book records.  Responses use the
``{"status": ..., "message": ..., "data": ...}`` envelope; failures
are raised by ``BookService`` and rendered by the exception handlers
registered in ``main.create_app``.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, status

from bookshelf_api.app.schemas.book import (
    BookCreatedResponse,
    BookData,
    BookIdData,
    BookListData,
    BookListResponse,
    BookPayload,
    BookResponse,
    MessageResponse,
)
from bookshelf_api.app.services.book_service import BookService, parse_flag

router = APIRouter()


def get_book_service(request: Request) -> BookService:
    """Dependency returning the service bound to the application's store."""
    settings = request.app.state.settings
    return BookService(
        request.app.state.book_store,
        locale=settings.locale,
        recompute_finished_on_update=settings.recompute_finished_on_update,
    )


@router.post("", response_model=BookCreatedResponse, status_code=status.HTTP_201_CREATED)
async def add_book(
    payload: BookPayload,
    service: BookService = Depends(get_book_service),
) -> BookCreatedResponse:
    """Create a book and return its generated id."""
    book_id = await service.create_book(payload)
    return BookCreatedResponse(
        message=service.message("add.success"),
        data=BookIdData(bookId=book_id),
    )


@router.get("", response_model=BookListResponse)
async def list_books(
    name: Optional[str] = Query(None, description="Case-insensitive substring of the book name"),
    reading: Optional[str] = Query(None, description="1 for books being read, any other value for the rest"),
    finished: Optional[str] = Query(None, description="1 for finished books, any other value for the rest"),
    service: BookService = Depends(get_book_service),
) -> BookListResponse:
    """List books, optionally filtered.  Only ``id``, ``name`` and ``publisher`` are returned."""
    books = await service.list_books(
        name=name,
        reading=parse_flag(reading),
        finished=parse_flag(finished),
    )
    return BookListResponse(data=BookListData(books=books))


@router.get("/{book_id}", response_model=BookResponse)
async def get_book(
    book_id: str,
    service: BookService = Depends(get_book_service),
) -> BookResponse:
    book = await service.get_book(book_id)
    return BookResponse(data=BookData(book=book))


@router.put("/{book_id}", response_model=MessageResponse)
async def update_book(
    book_id: str,
    payload: BookPayload,
    service: BookService = Depends(get_book_service),
) -> MessageResponse:
    """Replace the fields of an existing book."""
    await service.update_book(book_id, payload)
    return MessageResponse(message=service.message("update.success"))


@router.delete("/{book_id}", response_model=MessageResponse)
async def delete_book(
    book_id: str,
    service: BookService = Depends(get_book_service),
) -> MessageResponse:
    await service.delete_book(book_id)
    return MessageResponse(message=service.message("delete.success"))
