# src/docrag/loaders/html.py
"""HTML loading and readable-text extraction."""

import re
from pathlib import Path

from bs4 import BeautifulSoup, Tag

from docrag.exceptions import LoaderError
from docrag.loaders.base import Loader
from docrag.models import SourceDocument

_TAG_PATTERN = re.compile(r"</?[a-z][\s\S]*>", re.IGNORECASE)
_DOCTYPE_PATTERN = re.compile(r"<!DOCTYPE\s+html>", re.IGNORECASE)
_COMMENT_PATTERN = re.compile(r"<!--[\s\S]*?-->")
_WHITESPACE = re.compile(r"\s+")

# Tags removed entirely (including their content)
REMOVE_TAGS = ["script", "style", "noscript", "iframe", "svg", "nav", "header", "footer"]

# Tried in order; the first one with text becomes the extraction root
MAIN_CONTENT_SELECTORS = ["main", "article", "#content", ".content"]

BLOCK_TAGS = ["h1", "h2", "h3", "h4", "h5", "h6", "p", "li", "pre", "blockquote"]
BULLET = "• "


def is_html(content: str) -> bool:
    """Return True if the content looks like HTML (tags, doctype or comments)."""
    return bool(
        _TAG_PATTERN.search(content)
        or _DOCTYPE_PATTERN.search(content)
        or _COMMENT_PATTERN.search(content)
    )


def _normalize(text: str) -> str:
    return _WHITESPACE.sub(" ", text).strip()


def _find_main_content(soup: BeautifulSoup) -> Tag | None:
    for selector in MAIN_CONTENT_SELECTORS:
        element = soup.select_one(selector)
        if element is not None and element.get_text(strip=True):
            return element
    return None


def extract_text_from_html(html: str) -> str:
    """Extract readable text from HTML.

    Scripts, styles and page chrome (nav, header, footer) are dropped.
    Text comes from the main content area when one exists, otherwise from
    the whole page. Headings, paragraphs and list items each become their
    own paragraph (list items prefixed with a bullet), so the result keeps
    blank-line paragraph boundaries for chunking.

    Content that is not HTML is returned unchanged.
    """
    if not is_html(html):
        return html

    soup = BeautifulSoup(html, "html.parser")
    for tag in soup(REMOVE_TAGS):
        tag.decompose()

    root: Tag = _find_main_content(soup) or soup

    blocks: list[str] = []
    for element in root.find_all(BLOCK_TAGS):
        # Nested blocks (e.g. <p> inside <li>) are covered by their parent
        if element.find_parent(BLOCK_TAGS) is not None:
            continue
        text = _normalize(element.get_text(" "))
        if text:
            blocks.append(f"{BULLET}{text}" if element.name == "li" else text)

    if blocks:
        return "\n\n".join(blocks)

    return _normalize(root.get_text(" "))


def extract_metadata(html: str) -> dict[str, str]:
    """Extract title, description and author from an HTML document.

    The title falls back to the first <h1>. Only keys with a value are
    returned.
    """
    if not is_html(html):
        return {}

    soup = BeautifulSoup(html, "html.parser")
    metadata: dict[str, str] = {}

    title = soup.title.get_text(strip=True) if soup.title else ""
    if not title:
        h1 = soup.find("h1")
        title = h1.get_text(strip=True) if h1 else ""
    if title:
        metadata["title"] = title

    for key, selectors in (
        ("description", ['meta[name="description"]', 'meta[property="og:description"]']),
        ("author", ['meta[name="author"]', 'meta[property="article:author"]']),
    ):
        for selector in selectors:
            tag = soup.select_one(selector)
            content = tag.get("content") if tag else None
            if isinstance(content, str) and content.strip():
                metadata[key] = content.strip()
                break

    return metadata


class HTMLLoader(Loader):
    """Load local HTML files as readable text.

    Example:
        loader = HTMLLoader()
        source = loader.load("page.html")
        source.metadata["title"]
    """

    SUPPORTED_EXTENSIONS = {".html", ".htm"}

    def supports(self, location: str) -> bool:
        """Check if this loader supports the given file."""
        return Path(location).suffix.lower() in self.SUPPORTED_EXTENSIONS

    def load(self, location: str) -> SourceDocument:
        """Load an HTML file and return its readable text."""
        file_path = Path(location)
        if not file_path.is_file():
            raise LoaderError(location, f"File not found: {location}")

        try:
            content = file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise LoaderError(location, f"Failed to read from file {location}: {e}") from e

        return SourceDocument(
            text=extract_text_from_html(content) if content.strip() else "",
            source=str(file_path.resolve()),
            metadata={"type": "html", **extract_metadata(content)},
        )
