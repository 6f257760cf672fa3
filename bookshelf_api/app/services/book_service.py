"""
Service layer for book records.

``BookService`` implements the five book operations on top of a
``BookStore``.  Each mutating call is a single read-modify-persist
step: the in-memory collection is changed first and then written to
disk in full.  Validation and lookup failures are raised as
``ValidationError`` / ``NotFoundError`` and turned into HTTP
responses by the handlers in ``main``.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import List, Optional

from bookshelf_api.app.core.exceptions import NotFoundError, ValidationError
from bookshelf_api.app.core.messages import DEFAULT_LOCALE, get_message
from bookshelf_api.app.core.storage import BookStore
from bookshelf_api.app.schemas.book import Book, BookPayload, BookSummary

logger = logging.getLogger(__name__)


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with milliseconds, e.g. ``2024-05-01T10:00:00.000Z``."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_flag(value: Optional[str]) -> Optional[bool]:
    """Interpret a query-string flag: ``"1"`` is true, anything else false, absent is ``None``."""
    if value is None:
        return None
    return value == "1"


class BookService:
    """Book operations bound to a store and a message locale."""

    def __init__(
        self,
        store: BookStore,
        locale: str = DEFAULT_LOCALE,
        recompute_finished_on_update: bool = False,
    ) -> None:
        self.store = store
        self.locale = locale
        self.recompute_finished_on_update = recompute_finished_on_update

    def message(self, key: str) -> str:
        return get_message(key, self.locale)

    def _validate(self, data: BookPayload, action: str) -> None:
        if not data.name:
            raise ValidationError(self.message(f"{action}.missing_name"))
        read_page = self._page_number(data, "readPage")
        page_count = self._page_number(data, "pageCount")
        if read_page is not None and page_count is not None and read_page > page_count:
            raise ValidationError(self.message(f"{action}.read_page_exceeds"))

    @staticmethod
    def _page_number(data: BookPayload, field: str) -> Optional[int]:
        """Page value for the readPage/pageCount check.

        An explicit ``null`` compares as zero; an absent field returns
        ``None`` and skips the check.
        """
        value = getattr(data, field)
        if value is None and field in data.model_fields_set:
            return 0
        return value

    async def create_book(self, data: BookPayload) -> str:
        """Validate, stamp and append a new book; return its id."""
        self._validate(data, "add")
        now = utc_timestamp()
        book = Book(
            id=str(uuid.uuid4()),
            **data.model_dump(),
            finished=data.pageCount == data.readPage,
            insertedAt=now,
            updatedAt=now,
        )
        self.store.append(book)
        self.store.save()
        logger.info("Created book %s (%s)", book.id, book.name)
        return book.id

    async def list_books(
        self,
        name: Optional[str] = None,
        reading: Optional[bool] = None,
        finished: Optional[bool] = None,
    ) -> List[BookSummary]:
        """Return ``id``/``name``/``publisher`` of the books matching every given filter."""
        books = self.store.all()
        if name:
            needle = name.lower()
            books = [book for book in books if book.name and needle in book.name.lower()]
        if reading is not None:
            books = [book for book in books if book.reading is reading]
        if finished is not None:
            books = [book for book in books if book.finished is finished]
        return [BookSummary(id=book.id, name=book.name, publisher=book.publisher) for book in books]

    async def get_book(self, book_id: str) -> Book:
        book = self.store.find(book_id)
        if book is None:
            raise NotFoundError(self.message("get.not_found"))
        return book

    async def update_book(self, book_id: str, data: BookPayload) -> Book:
        """Replace every client-editable field of an existing book.

        ``id`` and ``insertedAt`` are kept.  ``finished`` is kept as well
        unless ``recompute_finished_on_update`` is set.
        """
        self._validate(data, "update")
        current = self.store.find(book_id)
        if current is None:
            raise NotFoundError(self.message("update.not_found"))
        finished = current.finished
        if self.recompute_finished_on_update:
            finished = data.pageCount == data.readPage
        updated = Book(
            id=current.id,
            **data.model_dump(),
            finished=finished,
            insertedAt=current.insertedAt,
            updatedAt=utc_timestamp(),
        )
        self.store.replace(book_id, updated)
        self.store.save()
        logger.info("Updated book %s", book_id)
        return updated

    async def delete_book(self, book_id: str) -> None:
        if not self.store.remove(book_id):
            raise NotFoundError(self.message("delete.not_found"))
        self.store.save()
        logger.info("Deleted book %s", book_id)
