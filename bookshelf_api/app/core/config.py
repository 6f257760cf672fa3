"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service runs out of the box; override them via environment variables
or by passing an explicit ``Settings`` instance to ``create_app``.
"""

import os
from dataclasses import dataclass
from pathlib import Path


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Bookshelf API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path of a log file.  Empty means console logging only.
    log_file: str = os.getenv("LOG_FILE", "")

    # Location of the JSON file holding the book collection.  A relative
    # path is resolved against the working directory by ``resolve_data_path``.
    data_path: str = os.getenv("BOOKS_DATA_PATH", "data/books.json")

    # Locale used for client-facing messages.  See ``core.messages``.
    locale: str = os.getenv("BOOKSHELF_LOCALE", "en")

    # When enabled, ``finished`` is recomputed from ``readPage`` and
    # ``pageCount`` on update as well as on creation.  Off by default to
    # keep the historical behaviour of the service.
    recompute_finished_on_update: bool = _env_flag("RECOMPUTE_FINISHED_ON_UPDATE")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "9000"))

    def resolve_data_path(self) -> Path:
        """Return the absolute path of the books data file."""
        path = Path(self.data_path)
        if path.is_absolute():
            return path
        return (Path.cwd() / path).resolve()


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must be set before importing this module.
settings = Settings()
