import logging
from typing import Optional
from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from ..config import SEARCH_DEFAULT_LIMIT, SEARCH_MAX_LIMIT
from ..dependencies import get_embedder, get_vector_store
from ..models import SearchHit, SearchResponse
from ..services.embedder import Embedder
from ..services.vector_store import VectorStore
from .documents import EMBEDDING_FAILED

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Search"])


def _parse_limit(raw: Optional[str]) -> Optional[int]:
    if raw is None or raw == "":
        return SEARCH_DEFAULT_LIMIT
    try:
        limit = int(raw)
    except ValueError:
        return None
    return limit if limit > 0 else None


@router.get("/api/search", response_model=SearchResponse)
async def search(
    q: Optional[str] = None,
    limit: Optional[str] = None,
    embedder: Embedder = Depends(get_embedder),
    vector_store: VectorStore = Depends(get_vector_store),
):
    if not q:
        return JSONResponse(status_code=400, content={"error": "Missing query parameter"})

    top_k = _parse_limit(limit)
    if top_k is None:
        return JSONResponse(status_code=400, content={"error": "Invalid limit parameter"})

    vector = await embedder.embed(q)
    if not vector:
        logger.warning("[Search] Embedding failed for query")
        return JSONResponse(status_code=500, content=EMBEDDING_FAILED)

    matches = await run_in_threadpool(vector_store.query, vector, min(top_k, SEARCH_MAX_LIMIT))

    results = [
        SearchHit(
            id=match.id,
            title=match.metadata.get("title") or "Untitled",
            similarity=match.score,
        )
        for match in matches
    ]
    logger.info(f"[Search] {len(results)} result(s) for query of length {len(q)}")
    return SearchResponse(query=q, results=results)
