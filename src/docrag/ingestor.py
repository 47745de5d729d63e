# src/docrag/ingestor.py
"""Ingestion pipeline for docrag."""

import logging
from collections.abc import Callable
from typing import Any

from docrag.chunker import Chunker
from docrag.embedder import Embedder
from docrag.library import DocumentLibrary
from docrag.models import Document, SourceDocument

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str, int, int, str], None]
"""Callback for ingestion progress updates.

Args:
    event: Event type: "chunking", "embedding" or "storing"
    current: Current progress count (0 to total)
    total: Total items to process
    message: Human-readable status message

Example:
    def on_progress(event: str, current: int, total: int, message: str) -> None:
        print(f"[{event}] {current}/{total}: {message}")
"""


class Ingestor:
    """Orchestrates the ingestion pipeline.

    Pipeline:
    1. Split the text into chunks
    2. Embed every chunk (batched, in order)
    3. Build a Document of (chunk, vector) pairs
    4. Add it to the library, which persists it

    Adding a document under an existing name replaces the old one.
    """

    def __init__(
        self,
        library: DocumentLibrary,
        chunker: Chunker,
        embedder: Embedder,
    ) -> None:
        """Initialize the ingestor.

        Args:
            library: Library that receives the finished documents
            chunker: Component that splits text into chunks
            embedder: Component that embeds chunk texts
        """
        self.library = library
        self.chunker = chunker
        self.embedder = embedder

    def ingest_text(
        self,
        name: str,
        text: str,
        metadata: dict[str, Any] | None = None,
        on_progress: ProgressCallback | None = None,
    ) -> Document:
        """Chunk, embed and store a text under the given name.

        Args:
            name: Document name (unique key in the library)
            text: Full document text
            metadata: Optional metadata stored with the document
            on_progress: Optional callback(event, current, total, message)

        Returns:
            The stored Document

        Raises:
            ValueError: If name is empty
            EmbeddingError: If the embedding service fails
        """
        if not name.strip():
            raise ValueError("Document name cannot be empty")

        def progress(event: str, current: int, total: int, message: str = "") -> None:
            if on_progress:
                on_progress(event, current, total, message)

        progress("chunking", 0, 1, f"Chunking {len(text)} characters...")
        chunks = self.chunker.chunk(text)
        progress("chunking", 1, 1, f"Created {len(chunks)} chunks")
        logger.info("Document %r: %d characters, %d chunks", name, len(text), len(chunks))

        progress("embedding", 0, len(chunks), f"Embedding {len(chunks)} chunks...")
        embedded = self.embedder.embed_chunks(
            chunks,
            on_batch=lambda done, total: progress(
                "embedding", done, total, f"Embedded {done}/{total} chunks"
            ),
        )

        document = Document(
            name=name,
            text=text,
            chunks=embedded,
            metadata=metadata or {},
        )

        progress("storing", 0, 1, f"Storing {name}...")
        self.library.add(document)
        progress("storing", 1, 1, "Storing complete")

        return document

    def ingest_source(
        self,
        name: str,
        source: SourceDocument,
        on_progress: ProgressCallback | None = None,
    ) -> Document:
        """Ingest text produced by a loader, keeping its source and metadata."""
        metadata = {"source": source.source, **source.metadata}
        return self.ingest_text(name, source.text, metadata=metadata, on_progress=on_progress)
