# src/docrag/stores/base.py
"""Abstract base class for document persistence."""

import logging
from abc import ABC, abstractmethod

from docrag.models import Document

logger = logging.getLogger(__name__)


class DocumentStore(ABC):
    """Persists documents together with their chunks and embeddings."""

    @abstractmethod
    def save(self, document: Document) -> None:
        """Store a document, replacing any existing document with the same name."""
        ...

    @abstractmethod
    def load(self, name: str) -> Document | None:
        """Load a document by name. Returns None if not found."""
        ...

    @abstractmethod
    def remove(self, name: str) -> bool:
        """Remove a document. Returns True if it existed."""
        ...

    @abstractmethod
    def list_names(self) -> list[str]:
        """List the names of all stored documents."""
        ...

    def load_all(self) -> list[Document]:
        """Load every stored document.

        Documents that fail to load (corrupt rows, invalid embeddings) are
        logged and skipped so one bad entry does not hide the rest.
        """
        documents = []
        for name in self.list_names():
            try:
                document = self.load(name)
            except ValueError as e:
                logger.error("Error loading document %r: %s", name, e)
                continue
            if document is not None:
                documents.append(document)
        return documents
