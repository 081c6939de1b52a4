import itertools
import uuid

import pytest

import docsearch.routes.documents as documents_module


def _spy_inserts(monkeypatch, document_store):
    calls = []
    original = document_store.insert

    def insert(*args):
        calls.append(args)
        return original(*args)

    monkeypatch.setattr(document_store, "insert", insert)
    return calls


def test_create_document_writes_vector_then_row(client, embedder, vector_store, document_store, monkeypatch):
    inserts = _spy_inserts(monkeypatch, document_store)

    resp = client.post("/api/documents", json={"title": "T", "content": "hello world"})

    assert resp.status_code == 200
    body = resp.json()
    assert set(body) == {"id", "title", "content"}
    assert body["title"] == "T"
    assert body["content"] == "hello world"
    uuid.UUID(body["id"])

    assert embedder.calls == ["hello world"]
    assert vector_store.upserts == [(body["id"], [0.1, 0.2], {"title": "T"})]
    assert len(inserts) == 1
    doc_id, title, content, vector_id, created = inserts[0]
    assert (doc_id, title, content, vector_id) == (body["id"], "T", "hello world", body["id"])
    assert isinstance(created, int)


def test_created_document_round_trips_through_get(client):
    ids = set()
    for i in range(3):
        created = client.post("/api/documents", json={"title": f"Doc {i}", "content": f"body {i}"}).json()
        ids.add(created["id"])

        row = client.get(f"/api/documents/{created['id']}")
        assert row.status_code == 200
        data = row.json()
        assert data["title"] == f"Doc {i}"
        assert data["content"] == f"body {i}"
        assert data["vector_id"] == created["id"]
        assert isinstance(data["created"], int)

    assert len(ids) == 3


def test_embedding_failure_writes_nothing(client, embedder, vector_store, document_store):
    embedder.vector = None

    resp = client.post("/api/documents", json={"title": "T", "content": "hello"})

    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to generate embedding"}
    assert vector_store.upserts == []
    assert document_store.list_recent() == []


def test_empty_embedding_counts_as_failure(client, embedder, vector_store):
    embedder.vector = []

    resp = client.post("/api/documents", json={"title": "T", "content": "hello"})

    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to generate embedding"}
    assert vector_store.upserts == []


def test_get_unknown_document_is_plain_text_404(client):
    resp = client.get("/api/documents/does-not-exist")

    assert resp.status_code == 404
    assert resp.text == "Not Found"
    assert resp.headers["content-type"].startswith("text/plain")


def test_list_orders_newest_first_and_omits_content(client, monkeypatch):
    clock = itertools.count(1_700_000_000)
    monkeypatch.setattr(documents_module, "_now", lambda: next(clock))

    titles = [f"doc-{i}" for i in range(5)]
    for title in titles:
        client.post("/api/documents", json={"title": title, "content": "x"})

    resp = client.get("/api/documents")

    assert resp.status_code == 200
    documents = resp.json()["documents"]
    assert [d["title"] for d in documents] == list(reversed(titles))
    assert all(set(d) == {"id", "title", "created"} for d in documents)
    created = [d["created"] for d in documents]
    assert created == sorted(created, reverse=True)


def test_list_window_holds_fifty_newest(client, monkeypatch):
    clock = itertools.count(1_700_000_000)
    monkeypatch.setattr(documents_module, "_now", lambda: next(clock))

    first = client.post("/api/documents", json={"title": "oldest", "content": "x"}).json()
    for i in range(49):
        client.post("/api/documents", json={"title": f"doc-{i}", "content": "x"})

    listed = client.get("/api/documents").json()["documents"]
    assert len(listed) == 50
    assert first["id"] in {d["id"] for d in listed}

    client.post("/api/documents", json={"title": "newest", "content": "x"})

    listed = client.get("/api/documents").json()["documents"]
    assert len(listed) == 50
    assert listed[0]["title"] == "newest"
    assert first["id"] not in {d["id"] for d in listed}


def test_list_is_empty_without_documents(client):
    resp = client.get("/api/documents")

    assert resp.status_code == 200
    assert resp.json() == {"documents": []}


@pytest.mark.parametrize("method,path", [
    ("PUT", "/api/documents"),
    ("DELETE", "/api/documents"),
    ("POST", "/api/documents/some-id"),
    ("DELETE", "/api/documents/some-id"),
])
def test_unsupported_methods_are_405(client, method, path):
    resp = client.request(method, path)

    assert resp.status_code == 405
    assert resp.text == "Method not allowed"


def test_malformed_json_is_rejected(client, embedder, vector_store):
    resp = client.post(
        "/api/documents",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )

    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid JSON body"}
    assert embedder.calls == []
    assert vector_store.upserts == []


@pytest.mark.parametrize("payload,field", [
    ({"title": "T"}, "content"),
    ({"content": "c"}, "title"),
    ({"title": 123, "content": "c"}, "title"),
])
def test_invalid_body_names_the_field(client, embedder, payload, field):
    resp = client.post("/api/documents", json=payload)

    assert resp.status_code == 400
    body = resp.json()
    assert body["error"] == "Invalid request body"
    assert field in body["details"]
    assert embedder.calls == []


def test_insert_failure_after_upsert_is_internal_error(client, vector_store, document_store, monkeypatch):
    def failing_insert(*args):
        raise RuntimeError("disk full")

    monkeypatch.setattr(document_store, "insert", failing_insert)

    resp = client.post("/api/documents", json={"title": "T", "content": "c"})

    assert resp.status_code == 500
    assert resp.json() == {"error": "Internal server error"}
    assert "disk full" not in resp.text
    # Known gap: the vector entry stays behind
    assert len(vector_store.upserts) == 1


def test_get_ignores_segments_after_the_id(client):
    created = client.post("/api/documents", json={"title": "T", "content": "body"}).json()

    resp = client.get(f"/api/documents/{created['id']}/extra/parts")

    assert resp.status_code == 200
    assert resp.json()["id"] == created["id"]
    assert resp.json()["content"] == "body"


def test_get_with_empty_id_is_404(client):
    resp = client.get("/api/documents/")

    assert resp.status_code == 404
    assert resp.text == "Not Found"


@pytest.mark.parametrize("method,path", [
    ("GET", "/api/documentsfoo"),
    ("POST", "/api/documentsfoo"),
    ("GET", "/api/documents-archive/1"),
    ("HEAD", "/api/documents/some-id"),
])
def test_other_paths_under_documents_prefix_are_405(client, embedder, method, path):
    resp = client.request(method, path)

    assert resp.status_code == 405
    if method != "HEAD":
        assert resp.text == "Method not allowed"
    assert embedder.calls == []
