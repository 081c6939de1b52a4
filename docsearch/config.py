import os
from dotenv import load_dotenv

load_dotenv()

# URL of the embedding service (can be overridden via env var)
EMBEDDER_URL = os.getenv("EMBEDDER_URL", "http://127.0.0.1:8000/embed")
EMBEDDING_MODEL = os.getenv("EMBEDDING_MODEL", "bge-base-en-v1.5")
EMBEDDER_TIMEOUT = float(os.getenv("EMBEDDER_TIMEOUT", "30"))

PERSIST_DIR = os.getenv("PERSIST_DIR", "./chroma_store")
COLLECTION_NAME = os.getenv("COLLECTION_NAME", "documents")

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./docsearch.db")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "8787"))

# Listing and search bounds
LIST_LIMIT = 50
SEARCH_DEFAULT_LIMIT = 10
SEARCH_MAX_LIMIT = 20
