"""
Document Search API.

A FastAPI service that stores documents alongside their embeddings and serves
similarity search over them.

Main components:
- main: FastAPI application setup, CORS and error containment
- config: Configuration and environment variables
- models: Pydantic request/response data models
- routes: API endpoint handlers
- services: Embedding client, vector index, document table, reconciliation
- client: Async HTTP client for the API
"""

from .config import EMBEDDER_URL, PERSIST_DIR, COLLECTION_NAME, DATABASE_URL
from .models import DocumentCreate, SearchResponse

__all__ = [
    "EMBEDDER_URL",
    "PERSIST_DIR",
    "COLLECTION_NAME",
    "DATABASE_URL",
    "DocumentCreate",
    "SearchResponse",
]
