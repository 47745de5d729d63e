# src/docrag/loaders/registry.py
"""Loader registry for auto-selecting loaders."""

from docrag.loaders.base import Loader
from docrag.loaders.html import HTMLLoader
from docrag.loaders.text import TextLoader
from docrag.loaders.url import URLLoader
from docrag.models import SourceDocument


class LoaderRegistry:
    """Registry for document loaders.

    Selects the first registered loader that supports a location.
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._loaders: list[Loader] = []

    def register(self, loader: Loader) -> None:
        """Register a loader."""
        self._loaders.append(loader)

    def find_loader(self, location: str) -> Loader | None:
        """Find a loader that supports the given location."""
        for loader in self._loaders:
            if loader.supports(location):
                return loader
        return None

    def load(self, location: str) -> SourceDocument:
        """Load a location using the appropriate loader.

        Raises:
            ValueError: If no loader supports the location
        """
        loader = self.find_loader(location)
        if loader is None:
            raise ValueError(f"No loader found for: {location}")
        return loader.load(location)

    @classmethod
    def default(cls) -> "LoaderRegistry":
        """Create a registry with URL, HTML and text loaders registered."""
        registry = cls()
        registry.register(URLLoader())
        registry.register(HTMLLoader())
        registry.register(TextLoader())
        return registry
