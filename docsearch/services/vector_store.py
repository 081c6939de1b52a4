import logging
import chromadb

from typing import Any, List, Dict, Optional
from ..config import PERSIST_DIR, COLLECTION_NAME
from ..models import VectorMatch
from .utils import normalize_metadata

logger = logging.getLogger(__name__)


# -------------------------
# VECTOR STORE
# -------------------------

class VectorStore:
    """
    Chroma-backed vector index.

    The collection uses cosine space. Chroma reports cosine *distance*, so
    ``query`` converts it once into cosine similarity (``1 - distance``,
    higher is better); that is the score this index exposes to callers.
    """

    def __init__(self, client: Optional[Any] = None, collection_name: str = COLLECTION_NAME):
        self.client = client if client is not None else chromadb.PersistentClient(path=PERSIST_DIR)
        self.collection = self.client.get_or_create_collection(
            name=collection_name,
            metadata={"hnsw:space": "cosine"},
        )
        logger.info(f"VectorStore initialized on collection '{collection_name}'")

    # -------------------------
    # UPSERT
    # -------------------------
    def upsert(self, doc_id: str, vector: List[float], metadata: Dict):
        if not isinstance(metadata, dict):
            raise ValueError("Metadata must be a dictionary.")
        if not vector:
            raise ValueError("Vector must be a non-empty list of floats.")

        self.collection.upsert(
            ids=[doc_id],
            embeddings=[vector],
            metadatas=[normalize_metadata(metadata)],
        )
        logger.info(f"Vector upserted with ID {doc_id}")

    # -------------------------
    # QUERY
    # -------------------------
    def query(self, query_vector: List[float], top_k: int) -> List[VectorMatch]:
        results = self.collection.query(
            query_embeddings=[query_vector],
            n_results=top_k,
            include=["metadatas", "distances"],
        )

        # Chroma returns lists-of-lists, one inner list per query vector
        ids_list = results.get("ids") or [[]]
        distances_list = results.get("distances") or [[]]
        metadatas_list = results.get("metadatas") or [[]]

        ids = ids_list[0] or []
        distances = distances_list[0] or []
        metadatas = metadatas_list[0] or []

        matches = []
        for i, doc_id in enumerate(ids):
            distance = distances[i] if i < len(distances) else None
            if distance is None:
                continue
            matches.append(VectorMatch(
                id=doc_id,
                score=1.0 - float(distance),
                metadata=(metadatas[i] if i < len(metadatas) else None) or {},
            ))
        return matches

    # -------------------------
    # MAINTENANCE
    # -------------------------
    def all_ids(self) -> List[str]:
        return list(self.collection.get(include=[]).get("ids") or [])

    def delete(self, ids: List[str]):
        if not ids:
            return
        self.collection.delete(ids=ids)
        logger.info(f"Deleted {len(ids)} vector(s)")
