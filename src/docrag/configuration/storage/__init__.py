# src/docrag/configuration/storage/__init__.py
"""Storage configurations for docrag."""

from docrag.configuration.storage.local import LocalStorage

__all__ = ["LocalStorage"]
