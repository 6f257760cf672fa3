"""Tests for the book service layer."""

import asyncio
import json
from pathlib import Path

import pytest

from bookshelf_api.app.core.exceptions import NotFoundError, ValidationError
from bookshelf_api.app.core.storage import BookStore
from bookshelf_api.app.schemas.book import BookPayload
from bookshelf_api.app.services import book_service
from bookshelf_api.app.services.book_service import BookService, parse_flag


@pytest.fixture
def store(tmp_path: Path) -> BookStore:
    return BookStore(tmp_path / "books.json")


@pytest.fixture
def service(store: BookStore) -> BookService:
    return BookService(store)


def payload(**overrides) -> BookPayload:
    fields = {
        "name": "Clean Code",
        "year": 2008,
        "author": "Robert C. Martin",
        "summary": "A handbook",
        "publisher": "Prentice Hall",
        "pageCount": 100,
        "readPage": 10,
        "reading": True,
    }
    fields.update(overrides)
    return BookPayload(**fields)


class TestCreateBook:
    def test_assigns_id_timestamps_and_finished(self, service: BookService, store: BookStore) -> None:
        book_id = asyncio.run(service.create_book(payload(readPage=100)))

        book = store.find(book_id)
        assert book is not None
        assert book.finished is True
        assert book.insertedAt == book.updatedAt
        assert book.insertedAt.endswith("Z")

    def test_unfinished_when_pages_differ(self, service: BookService, store: BookStore) -> None:
        book_id = asyncio.run(service.create_book(payload()))
        assert store.find(book_id).finished is False

    def test_ids_are_unique(self, service: BookService) -> None:
        ids = {asyncio.run(service.create_book(payload())) for _ in range(20)}
        assert len(ids) == 20

    @pytest.mark.parametrize("name", [None, ""])
    def test_rejects_missing_name(self, service: BookService, store: BookStore, name) -> None:
        with pytest.raises(ValidationError, match="must supply a name"):
            asyncio.run(service.create_book(payload(name=name)))
        assert len(store) == 0
        assert not store.path.exists()

    def test_rejects_read_page_above_page_count(self, service: BookService, store: BookStore) -> None:
        with pytest.raises(ValidationError, match="readPage cannot exceed pageCount"):
            asyncio.run(service.create_book(payload(readPage=150, pageCount=100)))
        assert len(store) == 0

    def test_persists_after_create(self, service: BookService, store: BookStore) -> None:
        book_id = asyncio.run(service.create_book(payload()))
        saved = json.loads(store.path.read_text(encoding="utf-8"))
        assert [record["id"] for record in saved] == [book_id]


class TestListBooks:
    @pytest.fixture(autouse=True)
    def seed(self, service: BookService) -> None:
        asyncio.run(service.create_book(payload(name="Kaa Saga", reading=True, readPage=10)))
        asyncio.run(service.create_book(payload(name="Other", reading=True, readPage=100)))
        asyncio.run(service.create_book(payload(name="AAron", reading=False, readPage=10)))

    def test_no_filters_returns_all_in_insertion_order(self, service: BookService) -> None:
        books = asyncio.run(service.list_books())
        assert [book.name for book in books] == ["Kaa Saga", "Other", "AAron"]
        assert set(books[0].model_dump()) == {"id", "name", "publisher"}

    def test_name_filter_is_case_insensitive(self, service: BookService) -> None:
        books = asyncio.run(service.list_books(name="aa"))
        assert [book.name for book in books] == ["Kaa Saga", "AAron"]

    def test_filters_combine(self, service: BookService) -> None:
        books = asyncio.run(service.list_books(reading=True, finished=False))
        assert [book.name for book in books] == ["Kaa Saga"]

    def test_finished_filter(self, service: BookService) -> None:
        books = asyncio.run(service.list_books(finished=True))
        assert [book.name for book in books] == ["Other"]


class TestGetUpdateDelete:
    def test_get_unknown_id(self, service: BookService) -> None:
        with pytest.raises(NotFoundError, match="book not found"):
            asyncio.run(service.get_book("nope"))

    def test_update_keeps_id_and_inserted_at(self, service: BookService, monkeypatch) -> None:
        stamps = iter(["2024-01-01T00:00:00.000Z", "2024-02-01T00:00:00.000Z"])
        monkeypatch.setattr(book_service, "utc_timestamp", lambda: next(stamps))
        book_id = asyncio.run(service.create_book(payload()))

        updated = asyncio.run(service.update_book(book_id, payload(name="New Title")))

        assert updated.id == book_id
        assert updated.name == "New Title"
        assert updated.insertedAt == "2024-01-01T00:00:00.000Z"
        assert updated.updatedAt == "2024-02-01T00:00:00.000Z"

    def test_update_does_not_recompute_finished_by_default(self, service: BookService) -> None:
        book_id = asyncio.run(service.create_book(payload(readPage=10)))
        updated = asyncio.run(service.update_book(book_id, payload(readPage=100)))
        assert updated.finished is False

    def test_update_recomputes_finished_when_enabled(self, store: BookStore) -> None:
        service = BookService(store, recompute_finished_on_update=True)
        book_id = asyncio.run(service.create_book(payload(readPage=10)))
        updated = asyncio.run(service.update_book(book_id, payload(readPage=100)))
        assert updated.finished is True

    def test_update_validates_before_lookup(self, service: BookService) -> None:
        with pytest.raises(ValidationError, match="Failed to update book, must supply a name"):
            asyncio.run(service.update_book("missing", payload(name="")))

    def test_update_unknown_id(self, service: BookService) -> None:
        with pytest.raises(NotFoundError, match="update failed, id not found"):
            asyncio.run(service.update_book("missing", payload()))

    def test_delete_twice(self, service: BookService, store: BookStore) -> None:
        book_id = asyncio.run(service.create_book(payload()))
        asyncio.run(service.delete_book(book_id))
        assert len(store) == 0
        with pytest.raises(NotFoundError, match="delete failed, id not found"):
            asyncio.run(service.delete_book(book_id))

    def test_indonesian_messages(self, store: BookStore) -> None:
        service = BookService(store, locale="id")
        with pytest.raises(NotFoundError, match="Buku tidak ditemukan"):
            asyncio.run(service.get_book("nope"))


class TestParseFlag:
    def test_values(self) -> None:
        assert parse_flag(None) is None
        assert parse_flag("1") is True
        assert parse_flag("0") is False
        assert parse_flag("true") is False
