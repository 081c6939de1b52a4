"""
Reconciliation sweep between the vector index and the document table.

Creating a document upserts its vector before inserting the row, with no
transaction spanning both stores. A failed insert therefore leaves a vector
entry that no document row points to. These helpers find such entries and
optionally remove them.
"""
import logging
from typing import List

from .vector_store import VectorStore
from .document_store import DocumentStore

logger = logging.getLogger(__name__)


def find_orphaned_vectors(vector_store: VectorStore, document_store: DocumentStore) -> List[str]:
    vector_ids = vector_store.all_ids()
    known = document_store.existing_ids(vector_ids)
    orphans = sorted(set(vector_ids) - known)
    logger.info(f"Reconcile: {len(vector_ids)} vector(s) checked, {len(orphans)} orphaned")
    return orphans


def prune_orphaned_vectors(vector_store: VectorStore, document_store: DocumentStore) -> List[str]:
    orphans = find_orphaned_vectors(vector_store, document_store)
    vector_store.delete(orphans)
    return orphans
