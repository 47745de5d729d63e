# src/docrag/loaders/text.py
"""Plain text file loader."""

from pathlib import Path

from docrag.exceptions import LoaderError
from docrag.loaders.base import Loader
from docrag.models import SourceDocument


class TextLoader(Loader):
    """Load plain text and markdown files as-is.

    Chunking happens later in the ingestor, so the whole file is returned
    as a single SourceDocument.
    """

    SUPPORTED_EXTENSIONS = {
        ".txt",
        ".md",
        ".markdown",
        ".text",
        ".rst",
        ".csv",
        ".json",
        ".log",
    }

    def supports(self, location: str) -> bool:
        """Check if this loader supports the given file."""
        return Path(location).suffix.lower() in self.SUPPORTED_EXTENSIONS

    def load(self, location: str) -> SourceDocument:
        """Read a text file."""
        file_path = Path(location)

        if not file_path.is_file():
            raise LoaderError(location, f"File not found: {location}")

        try:
            content = file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise LoaderError(location, f"Failed to read from file {location}: {e}") from e

        is_markdown = file_path.suffix.lower() in {".md", ".markdown"}
        return SourceDocument(
            text=content,
            source=str(file_path.resolve()),
            metadata={"type": "markdown" if is_markdown else "text"},
        )
