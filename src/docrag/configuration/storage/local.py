# src/docrag/configuration/storage/local.py
"""Local filesystem storage configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from docrag.stores import DocumentStore

DATABASE_FILE = "documents.db"


@dataclass(frozen=True)
class LocalStorage:
    """Local filesystem storage using SQLite.

    Documents, chunks and embeddings are persisted to
    `<data_dir>/documents.db`.

    Args:
        data_dir: Base directory for storage files. Created if it doesn't exist.

    Example:
        storage = LocalStorage("./docrag_data")
    """

    data_dir: str

    @property
    def db_path(self) -> str:
        return os.path.join(self.data_dir, DATABASE_FILE)

    def build_store(self) -> DocumentStore:
        """Build the SQLite document store, creating the data directory if needed."""
        from docrag.stores import SQLiteDocumentStore

        Path(self.data_dir).mkdir(parents=True, exist_ok=True)
        return SQLiteDocumentStore(self.db_path)
