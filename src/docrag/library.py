# src/docrag/library.py
"""In-memory document library backed by a DocumentStore."""

import logging

from docrag.exceptions import DocumentNotFoundError
from docrag.models import Document
from docrag.stores import DocumentStore

logger = logging.getLogger(__name__)


class DocumentLibrary:
    """The set of documents available for querying.

    Documents are loaded from the store once at construction and kept in
    memory; every change is written through to the store. Pass the library
    to whatever needs it (ingestor, retriever, commands) rather than
    sharing module-level state.

    Example:
        library = DocumentLibrary(SQLiteDocumentStore("./docrag_data/documents.db"))
        library.add(document)
        library.get("essay")
        library.list_names()
    """

    def __init__(self, store: DocumentStore) -> None:
        """Create a library and load every readable document from the store.

        Args:
            store: Persistence backend
        """
        self.store = store
        self._documents: dict[str, Document] = {}
        for document in store.load_all():
            self._documents[document.name] = document
            logger.debug("Loaded document %r", document.name)
        logger.info("Loaded %d documents", len(self._documents))

    def __len__(self) -> int:
        return len(self._documents)

    def __contains__(self, name: object) -> bool:
        return name in self._documents

    def add(self, document: Document) -> None:
        """Add or replace a document and persist it."""
        self.store.save(document)
        self._documents[document.name] = document
        logger.info("Added document %r (%d chunks)", document.name, len(document.chunks))

    def get(self, name: str) -> Document | None:
        """Return a document by name, or None."""
        return self._documents.get(name)

    def require(self, name: str) -> Document:
        """Return a document by name.

        Raises:
            DocumentNotFoundError: If no document has that name
        """
        document = self._documents.get(name)
        if document is None:
            raise DocumentNotFoundError(name)
        return document

    def list_documents(self) -> list[Document]:
        """Return all documents in the order they were loaded or added."""
        return list(self._documents.values())

    def list_names(self) -> list[str]:
        return list(self._documents)

    def remove(self, name: str) -> bool:
        """Remove a document from memory and from the store.

        Returns:
            True if the document existed
        """
        if name not in self._documents:
            return False
        self.store.remove(name)
        del self._documents[name]
        logger.info("Removed document %r", name)
        return True
