import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from .routes import documents_router, search_router
from .services.embedder import Embedder
from .services.vector_store import VectorStore
from .services.document_store import DocumentStore
from .utils import setup_logging

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


# --- Lifespan Function ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    # Components injected through create_app are kept as-is; only the ones
    # built here are closed on shutdown
    owned_embedder = None
    owned_document_store = None
    if getattr(app.state, "embedder", None) is None:
        owned_embedder = app.state.embedder = Embedder()
    if getattr(app.state, "vector_store", None) is None:
        app.state.vector_store = VectorStore()
    if getattr(app.state, "document_store", None) is None:
        owned_document_store = app.state.document_store = DocumentStore()
        owned_document_store.create_tables()
    logger.info("Document search API ready")

    yield

    if owned_embedder is not None:
        await owned_embedder.aclose()
    if owned_document_store is not None:
        owned_document_store.close()
    logger.info("Document search API stopped")


def create_app(
    embedder: Optional[Embedder] = None,
    vector_store: Optional[VectorStore] = None,
    document_store: Optional[DocumentStore] = None,
) -> FastAPI:
    app = FastAPI(
        title="Document Search API",
        version="1.0",
        description="Stores documents with their embeddings and serves similarity search",
        lifespan=lifespan,
        redirect_slashes=False,
    )
    app.state.embedder = embedder
    app.state.vector_store = vector_store
    app.state.document_store = document_store

    # Register routers
    app.include_router(documents_router)
    app.include_router(search_router)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            return PlainTextResponse("Not Found", status_code=404)
        if exc.status_code == 405:
            return PlainTextResponse("Method not allowed", status_code=405, headers=exc.headers)
        return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        if any(err.get("type") == "json_invalid" for err in errors):
            return JSONResponse(status_code=400, content={"error": "Invalid JSON body"})

        details = []
        for err in errors:
            field = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
            details.append(field or "body")
        return JSONResponse(
            status_code=400,
            content={"error": "Invalid request body", "details": details},
        )

    # Wraps every request: preflight short-circuit, error containment, CORS
    @app.middleware("http")
    async def cors_middleware(request: Request, call_next):
        if request.method == "OPTIONS":
            response = Response(status_code=200)
        else:
            try:
                response = await call_next(request)
            except Exception:
                logger.exception(f"Unhandled error on {request.method} {request.url.path}")
                response = JSONResponse(status_code=500, content={"error": "Internal server error"})
        response.headers.update(CORS_HEADERS)
        return response

    return app


setup_logging()
app = create_app()
