# src/docrag/exceptions.py
"""Exceptions raised by docrag."""


class DocRAGError(Exception):
    """Base class for all docrag errors."""


class DimensionMismatchError(DocRAGError, ValueError):
    """Raised when vectors of different lengths are compared or indexed.

    Attributes:
        expected: The dimensionality the index (or first operand) has.
        actual: The dimensionality that was supplied.
    """

    def __init__(self, expected: int, actual: int, message: str | None = None) -> None:
        super().__init__(
            message or f"Vector dimension mismatch: expected {expected}, got {actual}"
        )
        self.expected = expected
        self.actual = actual


class InvalidChunkSizeError(DocRAGError, ValueError):
    """Raised when a chunk size is zero or negative."""

    def __init__(self, chunk_size: int) -> None:
        super().__init__(f"chunk_size must be a positive integer, got {chunk_size}")
        self.chunk_size = chunk_size


class DocumentNotFoundError(DocRAGError, LookupError):
    """Raised when a named document is not in the library."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Document not found: {name}")
        self.name = name


class EmbeddingError(DocRAGError):
    """Raised when the embedding service fails or returns an unusable response."""


class LoaderError(DocRAGError):
    """Raised when a source cannot be fetched or read.

    Attributes:
        location: The URL or path that failed to load.
    """

    def __init__(self, location: str, message: str) -> None:
        super().__init__(message)
        self.location = location
