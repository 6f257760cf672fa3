"""
Application package initializer.

The service is split into small layers: ``core`` holds settings,
logging, error types and the JSON file store, ``schemas`` the
pydantic models, ``services`` the book logic and ``api`` the HTTP
routes.  ``main`` ties them together in ``create_app``.
"""

from .main import app  # noqa: F401
