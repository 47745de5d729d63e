# src/docrag/embedder/base.py
"""Embedder abstract base class."""

from abc import ABC, abstractmethod
from collections.abc import Callable

from docrag.models import EmbeddedChunk

BatchCallback = Callable[[int, int], None]
"""Called after each embedding batch with (texts_embedded, total_texts)."""


class Embedder(ABC):
    """Abstract base class for embedding generation.

    Subclasses must implement embed_text and embed_texts.
    """

    @abstractmethod
    def embed_text(self, text: str) -> list[float]:
        """Generate an embedding vector for a single text."""
        ...

    @abstractmethod
    def embed_texts(
        self,
        texts: list[str],
        on_batch: BatchCallback | None = None,
    ) -> list[list[float]]:
        """Generate embedding vectors for multiple texts, preserving order."""
        ...

    def embed_chunks(
        self,
        chunks: list[str],
        on_batch: BatchCallback | None = None,
    ) -> list[EmbeddedChunk]:
        """Embed chunk texts and pair each with its vector."""
        if not chunks:
            return []
        embeddings = self.embed_texts(chunks, on_batch=on_batch)
        return [
            EmbeddedChunk(index=i, content=content, embedding=embedding)
            for i, (content, embedding) in enumerate(zip(chunks, embeddings, strict=True))
        ]
