"""Shared fixtures: in-memory collaborators and an app wired to them."""
from typing import Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from docsearch.main import create_app
from docsearch.models import VectorMatch
from docsearch.services.document_store import DocumentStore


class FakeEmbedder:
    def __init__(self, vector: Optional[List[float]] = None):
        self.vector = vector
        self.calls: List[str] = []
        self.closed = False

    async def embed(self, text: str) -> Optional[List[float]]:
        self.calls.append(text)
        return self.vector

    async def aclose(self):
        self.closed = True


class FakeVectorStore:
    def __init__(self):
        self.entries: Dict[str, dict] = {}
        self.upserts: List[tuple] = []
        self.queries: List[tuple] = []
        self.matches: List[VectorMatch] = []
        self.error: Optional[Exception] = None

    def upsert(self, doc_id, vector, metadata):
        if self.error is not None:
            raise self.error
        self.upserts.append((doc_id, vector, metadata))
        self.entries[doc_id] = {"values": vector, "metadata": metadata}

    def query(self, query_vector, top_k):
        self.queries.append((query_vector, top_k))
        return self.matches[:top_k]

    def all_ids(self):
        return list(self.entries)

    def delete(self, ids):
        for doc_id in ids:
            self.entries.pop(doc_id, None)


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def embedder():
    return FakeEmbedder([0.1, 0.2])


@pytest.fixture
def vector_store():
    return FakeVectorStore()


@pytest.fixture
def document_store(tmp_path):
    store = DocumentStore(f"sqlite:///{tmp_path / 'documents.db'}")
    store.create_tables()
    return store


@pytest.fixture
def app(embedder, vector_store, document_store):
    return create_app(embedder=embedder, vector_store=vector_store, document_store=document_store)


@pytest.fixture
def client(app):
    return TestClient(app)
