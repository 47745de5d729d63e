# src/docrag/stores/sqlite_document.py
"""SQLite document store implementation."""

import json
import logging
import sqlite3
from datetime import datetime
from pathlib import Path

from docrag.models import Document, EmbeddedChunk
from docrag.stores.base import DocumentStore

logger = logging.getLogger(__name__)


class SQLiteDocumentStore(DocumentStore):
    """SQLite-based document store.

    Documents live in a `documents` table; their chunks and embeddings
    (as JSON arrays) live in a `chunks` table keyed by (document, position).
    """

    def __init__(self, db_path: str) -> None:
        """Initialize the SQLite store."""
        self.db_path = db_path
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)
        self._init_db()

    def _init_db(self) -> None:
        """Create tables if they don't exist."""
        with sqlite3.connect(self.db_path) as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS documents (
                    name TEXT PRIMARY KEY,
                    text TEXT NOT NULL,
                    metadata TEXT NOT NULL,
                    created_at TEXT NOT NULL
                )
            """)
            conn.execute("""
                CREATE TABLE IF NOT EXISTS chunks (
                    document TEXT NOT NULL,
                    position INTEGER NOT NULL,
                    content TEXT NOT NULL,
                    embedding TEXT NOT NULL,
                    PRIMARY KEY (document, position)
                )
            """)
            conn.commit()

    def save(self, document: Document) -> None:
        """Store a document, overwriting if it exists."""
        with sqlite3.connect(self.db_path) as conn:
            conn.execute("DELETE FROM chunks WHERE document = ?", (document.name,))
            conn.execute(
                """
                INSERT OR REPLACE INTO documents (name, text, metadata, created_at)
                VALUES (?, ?, ?, ?)
                """,
                (
                    document.name,
                    document.text,
                    json.dumps(document.metadata),
                    document.created_at.isoformat(),
                ),
            )
            conn.executemany(
                """
                INSERT INTO chunks (document, position, content, embedding)
                VALUES (?, ?, ?, ?)
                """,
                [
                    (document.name, c.index, c.content, json.dumps(c.embedding))
                    for c in document.chunks
                ],
            )
            conn.commit()
        logger.debug("Saved document %r (%d chunks)", document.name, len(document.chunks))

    def load(self, name: str) -> Document | None:
        """Load a document by name."""
        with sqlite3.connect(self.db_path) as conn:
            row = conn.execute(
                "SELECT name, text, metadata, created_at FROM documents WHERE name = ?",
                (name,),
            ).fetchone()
            if row is None:
                return None
            chunk_rows = conn.execute(
                """
                SELECT position, content, embedding FROM chunks
                WHERE document = ? ORDER BY position
                """,
                (name,),
            ).fetchall()

        return Document(
            name=row[0],
            text=row[1],
            metadata=json.loads(row[2]),
            created_at=datetime.fromisoformat(row[3]),
            chunks=[
                EmbeddedChunk(index=r[0], content=r[1], embedding=json.loads(r[2]))
                for r in chunk_rows
            ],
        )

    def remove(self, name: str) -> bool:
        """Delete a document and its chunks."""
        with sqlite3.connect(self.db_path) as conn:
            conn.execute("DELETE FROM chunks WHERE document = ?", (name,))
            cursor = conn.execute("DELETE FROM documents WHERE name = ?", (name,))
            conn.commit()
            removed = cursor.rowcount > 0
        if removed:
            logger.debug("Removed document %r", name)
        return removed

    def list_names(self) -> list[str]:
        """List all document names in insertion order."""
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.execute("SELECT name FROM documents ORDER BY rowid")
            return [row[0] for row in cursor.fetchall()]
