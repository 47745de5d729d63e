# src/docrag/models/__init__.py
"""Data models for docrag."""

from docrag.models.document import Document, EmbeddedChunk
from docrag.models.results import QueryResponse, RetrievedChunk
from docrag.models.source import SourceDocument

__all__ = ["Document", "EmbeddedChunk", "SourceDocument", "RetrievedChunk", "QueryResponse"]
