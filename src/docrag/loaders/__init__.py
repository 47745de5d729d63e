# src/docrag/loaders/__init__.py
"""Document loaders for docrag."""

from docrag.loaders.base import Loader
from docrag.loaders.html import HTMLLoader, extract_metadata, extract_text_from_html, is_html
from docrag.loaders.registry import LoaderRegistry
from docrag.loaders.text import TextLoader
from docrag.loaders.url import SAMPLE_ESSAY_URL, URLLoader

__all__ = [
    "Loader",
    "LoaderRegistry",
    "TextLoader",
    "HTMLLoader",
    "URLLoader",
    "SAMPLE_ESSAY_URL",
    "is_html",
    "extract_text_from_html",
    "extract_metadata",
]
