import time
import logging
from typing import Iterable, List, Optional, Set

from sqlalchemy import Column, Integer, Text, create_engine, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from ..config import DATABASE_URL, LIST_LIMIT
from ..models import DocumentRow, DocumentSummary

logger = logging.getLogger(__name__)

Base = declarative_base()


class DocumentRecord(Base):
    __tablename__ = "documents"

    id = Column(Text, primary_key=True)
    title = Column(Text, nullable=False)
    content = Column(Text, nullable=False)
    vector_id = Column(Text, nullable=True)
    created = Column(Integer, default=lambda: int(time.time()))


class DocumentStore:
    """Relational store for document rows. All methods are blocking."""

    def __init__(self, url: str = DATABASE_URL, engine: Optional[Engine] = None):
        connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
        self.engine = engine or create_engine(url, connect_args=connect_args)
        self._session = sessionmaker(bind=self.engine, expire_on_commit=False)

    def create_tables(self):
        Base.metadata.create_all(self.engine)
        logger.info(f"Document tables ready on {self.engine.url.render_as_string(hide_password=True)}")

    def insert(self, doc_id: str, title: str, content: str, vector_id: str, created: Optional[int] = None):
        record = DocumentRecord(id=doc_id, title=title, content=content, vector_id=vector_id)
        # Left unset, the column default stamps the current epoch second
        if created is not None:
            record.created = created
        with self._session() as session, session.begin():
            session.add(record)

    def get(self, doc_id: str) -> Optional[DocumentRow]:
        with self._session() as session:
            record = session.get(DocumentRecord, doc_id)
            if record is None:
                return None
            return DocumentRow(
                id=record.id,
                title=record.title,
                content=record.content,
                vector_id=record.vector_id,
                created=record.created,
            )

    def list_recent(self, limit: int = LIST_LIMIT) -> List[DocumentSummary]:
        stmt = (
            select(DocumentRecord.id, DocumentRecord.title, DocumentRecord.created)
            .order_by(DocumentRecord.created.desc())
            .limit(limit)
        )
        with self._session() as session:
            return [
                DocumentSummary(id=row.id, title=row.title, created=row.created)
                for row in session.execute(stmt)
            ]

    def existing_ids(self, ids: Iterable[str]) -> Set[str]:
        ids = list(ids)
        if not ids:
            return set()
        found = set()
        # Chunked to stay under the bound-parameter limit of SQLite
        for start in range(0, len(ids), 500):
            chunk = ids[start:start + 500]
            stmt = select(DocumentRecord.id).where(DocumentRecord.id.in_(chunk))
            with self._session() as session:
                found.update(session.scalars(stmt))
        return found

    def close(self):
        self.engine.dispose()
