from pydantic import BaseModel, StrictStr, Field
from typing import List, Dict, Optional, Any


class DocumentCreate(BaseModel):
    title: StrictStr
    content: StrictStr


class DocumentCreated(BaseModel):
    id: str
    title: str
    content: str


class DocumentRow(BaseModel):
    id: str
    title: str
    content: str
    vector_id: Optional[str] = None
    created: Optional[int] = None


class DocumentSummary(BaseModel):
    id: str
    title: str
    created: Optional[int] = None


class DocumentList(BaseModel):
    documents: List[DocumentSummary]


class VectorMatch(BaseModel):
    """A single nearest-neighbour hit as reported by the vector index."""
    id: str
    score: float
    metadata: Dict[str, Any] = Field(default_factory=dict)


class SearchHit(BaseModel):
    id: str
    title: str
    similarity: float


class SearchResponse(BaseModel):
    query: str
    results: List[SearchHit]
