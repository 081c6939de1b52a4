import time
import uuid
import logging
from fastapi import APIRouter, Depends, HTTPException
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from ..config import LIST_LIMIT
from ..dependencies import get_embedder, get_vector_store, get_document_store
from ..models import DocumentCreate, DocumentCreated, DocumentList, DocumentRow
from ..services.embedder import Embedder
from ..services.vector_store import VectorStore
from ..services.document_store import DocumentStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/documents", tags=["Documents"])

EMBEDDING_FAILED = {"error": "Failed to generate embedding"}


def _now() -> int:
    return int(time.time())


# -------------------------
# CREATE DOCUMENT
# -------------------------
@router.post("", response_model=DocumentCreated)
async def create_document(
    req: DocumentCreate,
    embedder: Embedder = Depends(get_embedder),
    vector_store: VectorStore = Depends(get_vector_store),
    document_store: DocumentStore = Depends(get_document_store),
):
    """
    Embed the content, upsert its vector, then insert the document row.

    Nothing is written when the embedding fails. The vector is written before
    the row so a visible document always has its vector.
    """
    doc_id = str(uuid.uuid4())

    vector = await embedder.embed(req.content)
    if not vector:
        logger.warning(f"[Documents] Embedding failed for new document {doc_id}")
        return JSONResponse(status_code=500, content=EMBEDDING_FAILED)

    await run_in_threadpool(vector_store.upsert, doc_id, vector, {"title": req.title})
    await run_in_threadpool(
        document_store.insert,
        doc_id,
        req.title,
        req.content,
        doc_id,
        _now(),
    )

    logger.info(f"[Documents] Created {doc_id}")
    return DocumentCreated(id=doc_id, title=req.title, content=req.content)


# -------------------------
# LIST DOCUMENTS
# -------------------------
@router.get("", response_model=DocumentList)
async def list_documents(document_store: DocumentStore = Depends(get_document_store)):
    documents = await run_in_threadpool(document_store.list_recent, LIST_LIMIT)
    return DocumentList(documents=documents)


# -------------------------
# GET DOCUMENT BY ID
# -------------------------
@router.get("/{document_path:path}", response_model=DocumentRow)
async def get_document(document_path: str, document_store: DocumentStore = Depends(get_document_store)):
    # Only the first segment names the document; anything after it is ignored
    document_id = document_path.split("/", 1)[0]
    document = await run_in_threadpool(document_store.get, document_id)
    if document is None:
        raise HTTPException(status_code=404)
    return document


# -------------------------
# ANYTHING ELSE UNDER THE PREFIX
# -------------------------
@router.api_route(
    "{suffix:path}",
    methods=["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD"],
    include_in_schema=False,
)
async def unsupported(suffix: str):
    raise HTTPException(status_code=405)
