"""Shared fixtures for the Bookshelf API tests."""

from pathlib import Path
from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from bookshelf_api.app.core.config import Settings
from bookshelf_api.app.main import create_app


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    return tmp_path / "books.json"


@pytest.fixture
def settings(data_file: Path) -> Settings:
    return Settings(data_path=str(data_file), locale="en", recompute_finished_on_update=False)


@pytest.fixture
def client(settings: Settings) -> Iterator[TestClient]:
    app = create_app(settings)
    # Entering the context runs the startup hook, which loads the store.
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def book_payload() -> dict:
    return {
        "name": "Buku A",
        "year": 2010,
        "author": "John Doe",
        "summary": "Lorem ipsum dolor sit amet",
        "publisher": "Dicoding Indonesia",
        "pageCount": 100,
        "readPage": 25,
        "reading": False,
    }
