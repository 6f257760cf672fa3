"""
Error types raised by the book service.

Handlers registered in ``main.create_app`` translate these into the
``{"status": "fail", "message": ...}`` envelope with the matching HTTP
status code.
"""

from fastapi import status


class BookshelfError(Exception):
    """Base class for client-visible failures."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(BookshelfError):
    """The payload failed one of the book checks (name, readPage)."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(BookshelfError):
    """No book with the requested id exists."""

    status_code = status.HTTP_404_NOT_FOUND
