import httpx
from typing import Any, Optional

from .config import HOST, PORT

DEFAULT_BASE_URL = f"http://{HOST}:{PORT}"


class DocumentSearchClient:
    """
    Async client for the document search API.

    Usable as an async context manager. Pass ``transport`` to talk to an
    in-process app (``httpx.ASGITransport``) instead of the network.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, transport=transport)

    async def __aenter__(self) -> "DocumentSearchClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def create(self, title: str, content: str) -> Any:
        """Store a document; returns ``{id, title, content}``."""
        resp = await self._client.post("/api/documents", json={"title": title, "content": content})
        resp.raise_for_status()
        return resp.json()

    async def get(self, document_id: str) -> Optional[Any]:
        """Fetch one document row, or None if it does not exist."""
        resp = await self._client.get(f"/api/documents/{document_id}")
        if resp.status_code == 404:
            return None
        resp.raise_for_status()
        return resp.json()

    async def list(self) -> Any:
        resp = await self._client.get("/api/documents")
        resp.raise_for_status()
        return resp.json()

    async def search(self, query: str, limit: int = 10) -> Any:
        resp = await self._client.get("/api/search", params={"q": query, "limit": limit})
        resp.raise_for_status()
        return resp.json()
