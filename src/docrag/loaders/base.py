# src/docrag/loaders/base.py
"""Loader abstract base class."""

from abc import ABC, abstractmethod

from docrag.models import SourceDocument


class Loader(ABC):
    """Abstract base class for loading document text from a file or URL."""

    @abstractmethod
    def load(self, location: str) -> SourceDocument:
        """Load a location and return its text.

        Args:
            location: File path or URL to load

        Returns:
            SourceDocument with the extracted text and any metadata found

        Raises:
            LoaderError: If the location cannot be read
        """
        ...

    @abstractmethod
    def supports(self, location: str) -> bool:
        """Check if this loader supports the given location."""
        ...
