"""
JSON file storage for the book collection.

``BookStore`` owns the ordered, in-memory list of books and mirrors it
to a single JSON file.  The file is treated as a blob: ``load`` reads
and parses all of it, ``save`` serializes the whole collection and
overwrites it.  Neither method raises; failures are logged and the
service keeps running with whatever is in memory.

There is no locking.  Two requests that mutate and save at the same
time can overwrite each other's changes.
"""

import json
import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import List, Optional, Union

from pydantic import ValidationError as SchemaError

from ..schemas.book import Book

logger = logging.getLogger(__name__)


class BookStore:
    """In-memory book collection persisted to a JSON file."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        self._books: List[Book] = []

    def load(self) -> None:
        """Replace the collection with the contents of the data file.

        A missing, unreadable or malformed file leaves the store empty.
        Individual records that do not match the ``Book`` schema are
        kept as they are, so the next ``save`` writes them back unchanged.
        """
        try:
            with open(self.path, "r", encoding="utf-8") as fh:
                raw = json.load(fh)
            if not isinstance(raw, list):
                raise ValueError("expected a JSON array of books")
        except (OSError, ValueError) as exc:
            # json.JSONDecodeError is a ValueError
            logger.error("Error reading or parsing books data from %s: %s", self.path, exc)
            self._books = []
            return

        books: List[Book] = []
        for index, item in enumerate(raw):
            if not isinstance(item, dict):
                logger.error("Skipping book #%d in %s: not a JSON object", index, self.path)
                continue
            try:
                books.append(Book.model_validate(item))
            except SchemaError as exc:
                logger.error("Book #%d in %s does not match the schema, keeping it as is: %s", index, self.path, exc)
                books.append(Book.model_construct(**item))
        self._books = books
        logger.info("Loaded %d books from %s", len(self._books), self.path)

    def save(self) -> None:
        """Write the whole collection to the data file.

        The JSON is written to a temporary file next to the target and
        then renamed over it, so readers never see a half-written file.
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            data = json.dumps(
                [book.model_dump(warnings=False) for book in self._books],
                indent=2,
                ensure_ascii=False,
            )
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=str(self.path.parent)
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    fh.write(data)
                if self.path.exists():
                    # mkstemp creates 0600 files; keep the existing file's mode.
                    os.chmod(tmp_name, stat.S_IMODE(self.path.stat().st_mode))
                os.replace(tmp_name, self.path)
            except OSError:
                # Leave no stray temp file behind when the write or rename fails.
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise
        except OSError as exc:
            logger.error("Error saving books data to %s: %s", self.path, exc)
            return
        logger.debug("Saved %d books to %s", len(self._books), self.path)

    # Collection helpers.  All lookups are linear scans.

    def all(self) -> List[Book]:
        """Return a shallow copy of the collection in insertion order."""
        return list(self._books)

    def find(self, book_id: str) -> Optional[Book]:
        return next((book for book in self._books if book.id == book_id), None)

    def append(self, book: Book) -> None:
        self._books.append(book)

    def replace(self, book_id: str, book: Book) -> bool:
        """Swap the record with ``book_id`` for ``book``.  Returns ``False`` if absent."""
        for index, current in enumerate(self._books):
            if current.id == book_id:
                self._books[index] = book
                return True
        return False

    def remove(self, book_id: str) -> bool:
        """Drop the record with ``book_id``.  Returns ``False`` if absent."""
        remaining = [book for book in self._books if book.id != book_id]
        if len(remaining) == len(self._books):
            return False
        self._books = remaining
        return True

    def __len__(self) -> int:
        return len(self._books)
