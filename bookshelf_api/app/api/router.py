"""
Top-level API router.

Aggregates the domain routers.  The book routes are mounted under
``/books``; ``/health`` reports liveness and the collection size.
"""

from typing import Any, Dict

from fastapi import APIRouter, Request

from .endpoints import books

router = APIRouter()

router.include_router(books.router, prefix="/books", tags=["books"])


@router.get("/health", tags=["health"])
async def health(request: Request) -> Dict[str, Any]:
    return {
        "status": "ok",
        "service": request.app.state.settings.project_name,
        "books": len(request.app.state.book_store),
    }
