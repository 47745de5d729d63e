# src/docrag/models/document.py
"""Document data models."""

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, Field, PrivateAttr, model_validator

from docrag.index import VectorIndex


class EmbeddedChunk(BaseModel):
    """A chunk of document text paired with its embedding vector."""

    index: int
    content: str
    embedding: list[float]


class Document(BaseModel):
    """A named document split into embedded chunks.

    Chunks are kept as (text, vector) pairs in document order, so chunk i
    always corresponds to row i of the document's vector index.
    """

    name: str
    text: str
    chunks: list[EmbeddedChunk] = Field(default_factory=list)
    metadata: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    _index: VectorIndex | None = PrivateAttr(default=None)

    @model_validator(mode="after")
    def _check_chunk_order(self) -> "Document":
        for position, chunk in enumerate(self.chunks):
            if chunk.index != position:
                raise ValueError(
                    f"Chunk at position {position} of '{self.name}' has index {chunk.index}"
                )
        return self

    @classmethod
    def from_pairs(
        cls,
        name: str,
        text: str,
        chunks: list[str],
        embeddings: list[list[float]],
        metadata: dict[str, Any] | None = None,
    ) -> "Document":
        """Build a document from chunk texts and their embeddings.

        Raises:
            ValueError: If the number of chunks and embeddings differ.
        """
        if len(chunks) != len(embeddings):
            raise ValueError(
                f"Embedding count mismatch: {len(chunks)} chunks, {len(embeddings)} embeddings"
            )
        return cls(
            name=name,
            text=text,
            chunks=[
                EmbeddedChunk(index=i, content=content, embedding=embedding)
                for i, (content, embedding) in enumerate(zip(chunks, embeddings, strict=True))
            ],
            metadata=metadata or {},
        )

    @property
    def chunk_texts(self) -> list[str]:
        return [chunk.content for chunk in self.chunks]

    @property
    def vectors(self) -> list[list[float]]:
        return [chunk.embedding for chunk in self.chunks]

    def vector_index(self) -> VectorIndex:
        """Return the vector index over this document's chunks (built once)."""
        if self._index is None:
            self._index = VectorIndex(self.vectors)
        return self._index
