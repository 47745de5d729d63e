# src/docrag/chunker/base.py
"""Chunker abstract base class."""

from abc import ABC, abstractmethod


class Chunker(ABC):
    """Abstract base class for splitting document text into chunks."""

    @abstractmethod
    def chunk(self, text: str) -> list[str]:
        """Split text into an ordered list of chunks."""
        ...
