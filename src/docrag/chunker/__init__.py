# src/docrag/chunker/__init__.py
"""Text chunking for docrag.

This module exports:
- Chunker: Abstract base class for chunkers
- ParagraphChunker: Paragraph-first chunker with sentence/word fallbacks
- chunk_text: Functional shortcut for ParagraphChunker(chunk_size).chunk(text)
"""

from docrag.chunker.base import Chunker
from docrag.chunker.paragraph import ParagraphChunker, chunk_text, split_paragraphs, split_sentences

__all__ = ["Chunker", "ParagraphChunker", "chunk_text", "split_paragraphs", "split_sentences"]
