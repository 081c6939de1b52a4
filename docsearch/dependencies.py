from fastapi import Request

from .services.embedder import Embedder
from .services.vector_store import VectorStore
from .services.document_store import DocumentStore


def get_embedder(request: Request) -> Embedder:
    return request.app.state.embedder


def get_vector_store(request: Request) -> VectorStore:
    return request.app.state.vector_store


def get_document_store(request: Request) -> DocumentStore:
    return request.app.state.document_store
