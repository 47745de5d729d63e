# src/docrag/settings.py
"""Behavioral settings for docrag.

Settings are passed programmatically; the library never reads environment
variables itself. The CLI layer (docrag.config) reads DOCRAG_* variables
and docrag.yaml and builds a Settings object from them.
"""

from pydantic import BaseModel, Field


class Settings(BaseModel):
    """Behavioral settings for docrag.

    These settings are independent of which completion/embedding provider
    is used.

    Example:
        settings = Settings(chunk_size=1024, default_k=4)
    """

    # Chunking
    chunk_size: int = Field(default=2048, gt=0)

    # Embedding
    embedding_batch_size: int = Field(default=100, gt=0)

    # Retrieval
    default_k: int = Field(default=2, ge=0)
    synthesis_prompt: str | None = None
    synthesis_temperature: float | None = 0.0

    # Retry configuration (LiteLLM handles exponential backoff for RateLimitError)
    num_retries: int = 3
