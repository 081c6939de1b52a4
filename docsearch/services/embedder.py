import httpx
import logging
from typing import List, Optional

from ..config import EMBEDDER_URL, EMBEDDING_MODEL, EMBEDDER_TIMEOUT

logger = logging.getLogger(__name__)


class Embedder:
    """
    Client for the external embedding service.

    The service accepts ``{"model": ..., "texts": [...]}`` and answers with
    ``{"items": [{"vector": [...]}, ...]}``. ``embed`` returns ``None`` whenever
    no usable vector comes back, so callers can report it as an embedding
    failure rather than a generic error.
    """

    def __init__(
        self,
        url: str = EMBEDDER_URL,
        model: str = EMBEDDING_MODEL,
        timeout: float = EMBEDDER_TIMEOUT,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.url = url
        self.model = model
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def embed(self, text: str) -> Optional[List[float]]:
        payload = {"model": self.model, "texts": [text]}
        try:
            resp = await self._client.post(self.url, json=payload)
            resp.raise_for_status()
            data = resp.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"[Embedder] Request to {self.url} failed: {e}")
            return None

        items = data.get("items") if isinstance(data, dict) else None
        if not items:
            logger.warning("[Embedder] Service returned no items")
            return None

        vector = items[0].get("vector") if isinstance(items[0], dict) else None
        if not vector:
            logger.warning("[Embedder] First item carries no vector")
            return None
        try:
            return [float(v) for v in vector]
        except (TypeError, ValueError):
            logger.warning("[Embedder] Vector contains non-numeric values")
            return None

    async def aclose(self):
        await self._client.aclose()
