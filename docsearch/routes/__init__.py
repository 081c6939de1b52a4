"""
API Routes module.

This module contains all FastAPI route handlers organized by resource:
- documents: Create, fetch and list documents
- search: Similarity search over stored documents
"""

from .documents import router as documents_router
from .search import router as search_router

__all__ = [
    "documents_router",
    "search_router",
]
