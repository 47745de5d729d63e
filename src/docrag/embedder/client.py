# src/docrag/embedder/client.py
"""Client-based embedder implementation."""

import logging

from docrag.embedder.base import BatchCallback, Embedder
from docrag.exceptions import EmbeddingError
from docrag.providers.base import EmbeddingClient

logger = logging.getLogger(__name__)


class ClientEmbedder(Embedder):
    """Embedder that uses an EmbeddingClient for generating embeddings.

    Large inputs are sent in batches of batch_size texts. Batches run
    sequentially, so the returned vectors are complete and in input order.

    Example:
        from docrag.providers.litellm import LiteLLMEmbeddingClient
        from docrag.embedder import ClientEmbedder

        client = LiteLLMEmbeddingClient(model="openai/text-embedding-3-small")
        embedder = ClientEmbedder(embedding_client=client)
    """

    def __init__(self, embedding_client: EmbeddingClient, batch_size: int = 100) -> None:
        """Initialize the embedder.

        Args:
            embedding_client: Any EmbeddingClient implementation
            batch_size: Maximum texts per embedding request

        Raises:
            ValueError: If batch_size is not positive
        """
        if batch_size <= 0:
            raise ValueError(f"batch_size must be positive, got {batch_size}")
        self._client = embedding_client
        self.batch_size = batch_size

    def embed_text(self, text: str) -> list[float]:
        """Generate an embedding vector for a single text."""
        return self._embed_batch([text])[0]

    def embed_texts(
        self,
        texts: list[str],
        on_batch: BatchCallback | None = None,
    ) -> list[list[float]]:
        """Generate embedding vectors for multiple texts (batched)."""
        embeddings: list[list[float]] = []
        for start in range(0, len(texts), self.batch_size):
            batch = texts[start : start + self.batch_size]
            embeddings.extend(self._embed_batch(batch))
            logger.debug("Embedded %d/%d texts", len(embeddings), len(texts))
            if on_batch:
                on_batch(len(embeddings), len(texts))
        return embeddings

    def _embed_batch(self, texts: list[str]) -> list[list[float]]:
        try:
            embeddings = self._client.embed(texts)
        except Exception as e:
            raise EmbeddingError(f"Failed to embed {len(texts)} texts: {e}") from e

        if len(embeddings) != len(texts):
            raise EmbeddingError(
                f"Embedding count mismatch: {len(texts)} texts, {len(embeddings)} embeddings"
            )
        return embeddings
