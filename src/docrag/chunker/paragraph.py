# src/docrag/chunker/paragraph.py
"""Paragraph-first chunker with sentence and word fallbacks."""

import logging
import re

import pysbd

from docrag.chunker.base import Chunker
from docrag.exceptions import InvalidChunkSizeError

logger = logging.getLogger(__name__)

PARAGRAPH_BREAK = re.compile(r"\n\s*\n")
PARAGRAPH_SEPARATOR = "\n\n"
SENTENCE_SEPARATOR = " "
WORD_SEPARATOR = " "

_segmenter = pysbd.Segmenter(language="en", clean=False, char_span=True)


def split_paragraphs(text: str) -> list[str]:
    """Split text on blank lines, dropping whitespace-only paragraphs."""
    return [p for p in PARAGRAPH_BREAK.split(text) if p.strip()]


def split_sentences(paragraph: str) -> list[str]:
    """Split a paragraph into trimmed sentences.

    Trailing text without terminal punctuation is kept as a final sentence,
    and no non-whitespace character of the paragraph is dropped.
    """
    sentences: list[str] = []
    cursor = 0
    for span in _segmenter.segment(paragraph):
        if span.end <= cursor:
            continue
        # Anything pysbd skipped before this span belongs to it
        sentence = paragraph[cursor : span.end].strip()
        cursor = span.end
        if sentence:
            sentences.append(sentence)

    tail = paragraph[cursor:].strip()
    if tail:
        sentences.append(tail)
    return sentences


class _ChunkBuffer:
    """Accumulates units until adding one more would exceed the limit."""

    def __init__(self, chunk_size: int) -> None:
        self.chunk_size = chunk_size
        self.current = ""
        self.chunks: list[str] = []

    def add(self, unit: str, separator: str) -> None:
        # Flush only on strict excess; an empty buffer accepts anything
        if self.current and len(self.current) + len(separator) + len(unit) > self.chunk_size:
            self.flush()
        self.current = f"{self.current}{separator}{unit}" if self.current else unit

    def flush(self) -> None:
        if self.current:
            self.chunks.append(self.current)
            self.current = ""


class ParagraphChunker(Chunker):
    """Split text at paragraph boundaries, falling back to sentences and words.

    Paragraphs are packed together up to chunk_size characters. A paragraph
    that is too long on its own is split into sentences, and a sentence that
    is too long is split into whitespace-delimited words. Words are never
    broken, so a single word longer than chunk_size becomes its own chunk.

    Example:
        chunker = ParagraphChunker(chunk_size=2048)
        chunks = chunker.chunk(document_text)
    """

    def __init__(self, chunk_size: int = 2048) -> None:
        """Initialize the chunker.

        Args:
            chunk_size: Maximum characters per chunk. Must be positive.

        Raises:
            InvalidChunkSizeError: If chunk_size is zero or negative.
        """
        if chunk_size <= 0:
            raise InvalidChunkSizeError(chunk_size)
        self.chunk_size = chunk_size

    def chunk(self, text: str) -> list[str]:
        """Split text into chunks of at most chunk_size characters."""
        if not text:
            return []

        buffer = _ChunkBuffer(self.chunk_size)

        for paragraph in split_paragraphs(text):
            if len(paragraph) <= self.chunk_size:
                buffer.add(paragraph, PARAGRAPH_SEPARATOR)
                continue

            # An oversized paragraph always starts a fresh chunk
            buffer.flush()
            for sentence in split_sentences(paragraph):
                if len(sentence) <= self.chunk_size:
                    buffer.add(sentence, SENTENCE_SEPARATOR)
                    continue
                for word in sentence.split():
                    buffer.add(word, WORD_SEPARATOR)

        buffer.flush()
        logger.debug(
            "Split %d characters into %d chunks (chunk_size=%d)",
            len(text),
            len(buffer.chunks),
            self.chunk_size,
        )
        return buffer.chunks


def chunk_text(text: str, chunk_size: int) -> list[str]:
    """Split text into chunks of at most chunk_size characters.

    Args:
        text: Document text. Empty text yields no chunks.
        chunk_size: Maximum characters per chunk.

    Returns:
        Ordered list of chunks.

    Raises:
        InvalidChunkSizeError: If chunk_size is zero or negative.
    """
    return ParagraphChunker(chunk_size).chunk(text)
