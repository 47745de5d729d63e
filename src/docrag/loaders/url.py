# src/docrag/loaders/url.py
"""Remote document loader over HTTP(S)."""

import logging

import httpx

from docrag import __version__
from docrag.exceptions import LoaderError
from docrag.loaders.base import Loader
from docrag.loaders.html import extract_metadata, extract_text_from_html, is_html
from docrag.models import SourceDocument

logger = logging.getLogger(__name__)

# Sample document offered by `docrag add --essay`
SAMPLE_ESSAY_URL = (
    "https://raw.githubusercontent.com/run-llama/llama_index/main/"
    "docs/docs/examples/data/paul_graham/paul_graham_essay.txt"
)

USER_AGENT = f"Mozilla/5.0 (compatible; docrag/{__version__})"


class URLLoader(Loader):
    """Fetch a document over HTTP(S).

    HTML responses are reduced to readable text and their title,
    description and author are kept as metadata. Anything else is
    returned as-is.

    Example:
        loader = URLLoader(timeout=10)
        source = loader.load(SAMPLE_ESSAY_URL)
    """

    def __init__(
        self,
        timeout: float = 30.0,
        user_agent: str = USER_AGENT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the URL loader.

        Args:
            timeout: Request timeout in seconds
            user_agent: User-Agent header sent with every request
            transport: Optional httpx transport (e.g. httpx.MockTransport in tests)
        """
        self.timeout = timeout
        self.user_agent = user_agent
        self._transport = transport

    def supports(self, location: str) -> bool:
        """Check if the location is an http(s) URL."""
        return location.lower().startswith(("http://", "https://"))

    def load(self, location: str) -> SourceDocument:
        """Fetch a URL and return its text."""
        logger.info("Fetching %s", location)
        try:
            with httpx.Client(
                timeout=self.timeout,
                follow_redirects=True,
                headers={"User-Agent": self.user_agent},
                transport=self._transport,
            ) as client:
                response = client.get(location)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise LoaderError(
                location,
                f"Failed to fetch from URL {location}: HTTP {e.response.status_code}",
            ) from e
        except httpx.HTTPError as e:
            raise LoaderError(location, f"Failed to fetch from URL {location}: {e}") from e

        content = response.text
        content_type = response.headers.get("content-type", "")
        metadata: dict[str, str] = {"url": str(response.url)}

        if "html" in content_type.lower() or is_html(content):
            logger.debug("Extracting text from HTML response (%d characters)", len(content))
            metadata["type"] = "html"
            metadata.update(extract_metadata(content))
            text = extract_text_from_html(content)
        else:
            metadata["type"] = "text"
            text = content

        return SourceDocument(text=text, source=location, metadata=metadata)
