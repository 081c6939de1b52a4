"""
Services module for the document search API.

This module wraps the three collaborators a request touches:
- embedder: Calls the external embedding service
- vector_store: Vector upsert and similarity query on ChromaDB
- document_store: Document rows in a SQLAlchemy-managed table
- reconcile: Finds vector entries left without a document row
- utils: Metadata normalization for the vector index
"""

from .embedder import Embedder
from .vector_store import VectorStore
from .document_store import DocumentStore, DocumentRecord
from .reconcile import find_orphaned_vectors, prune_orphaned_vectors
from .utils import normalize_metadata

__all__ = [
    "Embedder",
    "VectorStore",
    "DocumentStore",
    "DocumentRecord",
    "find_orphaned_vectors",
    "prune_orphaned_vectors",
    "normalize_metadata",
]
