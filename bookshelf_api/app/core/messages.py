"""
Client-facing message catalogue.

Messages are grouped by locale.  ``en`` is the default; ``id`` keeps
the Indonesian wording the service originally shipped with.  Use
``get_message`` rather than indexing ``MESSAGES`` so that unknown
locales fall back to English.
"""

from typing import Dict

DEFAULT_LOCALE = "en"

MESSAGES: Dict[str, Dict[str, str]] = {
    "en": {
        "add.success": "Book added successfully",
        "add.missing_name": "Failed to add book, must supply a name",
        "add.read_page_exceeds": "Failed to add book, readPage cannot exceed pageCount",
        "update.success": "Book updated successfully",
        "update.missing_name": "Failed to update book, must supply a name",
        "update.read_page_exceeds": "Failed to update book, readPage cannot exceed pageCount",
        "update.not_found": "Book update failed, id not found",
        "get.not_found": "Requested book not found",
        "delete.success": "Book deleted successfully",
        "delete.not_found": "Book delete failed, id not found",
        "invalid_payload": "Invalid request payload",
    },
    "id": {
        "add.success": "Buku berhasil ditambahkan",
        "add.missing_name": "Gagal menambahkan buku. Mohon isi nama buku",
        "add.read_page_exceeds": "Gagal menambahkan buku. readPage tidak boleh lebih besar dari pageCount",
        "update.success": "Buku berhasil diperbarui",
        "update.missing_name": "Gagal memperbarui buku. Mohon isi nama buku",
        "update.read_page_exceeds": "Gagal memperbarui buku. readPage tidak boleh lebih besar dari pageCount",
        "update.not_found": "Gagal memperbarui buku. Id tidak ditemukan",
        "get.not_found": "Buku tidak ditemukan",
        "delete.success": "Buku berhasil dihapus",
        "delete.not_found": "Buku gagal dihapus. Id tidak ditemukan",
        "invalid_payload": "Payload permintaan tidak valid",
    },
}


def get_message(key: str, locale: str = DEFAULT_LOCALE) -> str:
    """Return the message for ``key`` in ``locale``, falling back to English."""
    catalogue = MESSAGES.get(locale, MESSAGES[DEFAULT_LOCALE])
    return catalogue.get(key, MESSAGES[DEFAULT_LOCALE][key])
