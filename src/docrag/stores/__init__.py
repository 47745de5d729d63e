# src/docrag/stores/__init__.py
"""Storage abstractions for docrag."""

from docrag.stores.base import DocumentStore
from docrag.stores.sqlite_document import SQLiteDocumentStore

__all__ = ["DocumentStore", "SQLiteDocumentStore"]
