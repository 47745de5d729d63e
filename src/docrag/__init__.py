"""docrag - document question answering.

Split documents into chunks, embed them, and answer questions from the
chunks closest to the question.

Quick Start (LiteLLM + Local Storage):
    from docrag import DocRAG, LiteLLMProvider, LocalStorage, SAMPLE_ESSAY_URL

    rag = DocRAG(
        provider=LiteLLMProvider(
            llm="openai/gpt-4o-mini",
            embedding="openai/text-embedding-3-small",
        ),
        storage=LocalStorage("./docrag_data"),
    )

    # Ingest documents
    rag.ingest_location("essay", SAMPLE_ESSAY_URL)
    rag.ingest_text("notes", "Some text...")

    # Query one document, or all of them
    retriever = rag.retriever()
    response = retriever.get_answer("What did the author work on?", document="essay")

Explicit store:
    from docrag import DocRAG, LiteLLMProvider, SQLiteDocumentStore

    rag = DocRAG(
        provider=LiteLLMProvider(),
        store=SQLiteDocumentStore("./docs.db"),
    )
"""

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("docrag")
except PackageNotFoundError:
    # Source-tree fallback (e.g. running tests without installing the wheel).
    try:
        import tomllib
        from pathlib import Path

        def _read_version_from_pyproject() -> str | None:
            for parent in Path(__file__).resolve().parents:
                pyproject = parent / "pyproject.toml"
                if pyproject.exists():
                    data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
                    version = data.get("project", {}).get("version")
                    return str(version) if version is not None else None
            return None

        __version__ = _read_version_from_pyproject() or "unknown"
    except (OSError, ValueError):
        __version__ = "unknown"

# Chunking
from docrag.chunker import Chunker, ParagraphChunker, chunk_text

# Configuration objects
from docrag.configuration import (
    LiteLLMProvider,
    LocalStorage,
    ProviderConfig,
    StorageConfig,
)

# Central configuration
from docrag.docrag import DocRAG
from docrag.embedder import ClientEmbedder, Embedder

# Errors
from docrag.exceptions import (
    DimensionMismatchError,
    DocRAGError,
    DocumentNotFoundError,
    EmbeddingError,
    InvalidChunkSizeError,
    LoaderError,
)
from docrag.index import VectorIndex

# Pipelines
from docrag.ingestor import Ingestor
from docrag.library import DocumentLibrary

# File and URL loading
from docrag.loaders import SAMPLE_ESSAY_URL, Loader, LoaderRegistry, TextLoader, URLLoader

# Core models
from docrag.models import (
    Document,
    EmbeddedChunk,
    QueryResponse,
    RetrievedChunk,
    SourceDocument,
)

# Provider ABCs
from docrag.providers import EmbeddingClient, LLMClient
from docrag.retriever import Retriever
from docrag.settings import Settings

# Storage
from docrag.stores import DocumentStore, SQLiteDocumentStore

__all__ = [
    # Version
    "__version__",
    # Models
    "Document",
    "EmbeddedChunk",
    "QueryResponse",
    "RetrievedChunk",
    "SourceDocument",
    # Config
    "Settings",
    # Configuration objects
    "ProviderConfig",
    "StorageConfig",
    "LiteLLMProvider",
    "LocalStorage",
    # Storage
    "DocumentStore",
    "SQLiteDocumentStore",
    "DocumentLibrary",
    # Chunking
    "Chunker",
    "ParagraphChunker",
    "chunk_text",
    # Vector search
    "VectorIndex",
    # Embedding
    "Embedder",
    "ClientEmbedder",
    # Provider ABCs
    "LLMClient",
    "EmbeddingClient",
    # Pipelines
    "Ingestor",
    "Retriever",
    # Central configuration
    "DocRAG",
    # Loading
    "Loader",
    "LoaderRegistry",
    "TextLoader",
    "URLLoader",
    "SAMPLE_ESSAY_URL",
    # Errors
    "DocRAGError",
    "DimensionMismatchError",
    "DocumentNotFoundError",
    "EmbeddingError",
    "InvalidChunkSizeError",
    "LoaderError",
]
