# src/docrag/configuration/providers/litellm.py
"""LiteLLM provider configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from docrag.providers.litellm.models import ChatModels, EmbeddingModels

if TYPE_CHECKING:
    from docrag.embedder import Embedder
    from docrag.providers import LLMClient
    from docrag.settings import Settings


@dataclass(frozen=True)
class LiteLLMProvider:
    """Provider configuration using LiteLLM for completion and embedding calls.

    Args:
        llm: LiteLLM model identifier for answer synthesis.
             Examples: "openai/gpt-4o-mini", "anthropic/claude-haiku-4-5-20251001"
        embedding: LiteLLM model identifier for embeddings.
                   Examples: "openai/text-embedding-3-small", "ollama/nomic-embed-text"
        llm_api_key: Optional API key for the LLM. Defaults to the provider's env var.
        embedding_api_key: Optional API key for embeddings.

    Example:
        provider = LiteLLMProvider(
            llm="openai/gpt-4o-mini",
            embedding="openai/text-embedding-3-small",
        )
    """

    llm: str = ChatModels.GPT_4O_MINI
    embedding: str = EmbeddingModels.TEXT_3_SMALL
    llm_api_key: str | None = None
    embedding_api_key: str | None = None

    def build_embedder(self, settings: Settings) -> Embedder:
        """Build a ClientEmbedder using the LiteLLM embedding client.

        Args:
            settings: Settings containing embedding_batch_size and num_retries.
        """
        from docrag.embedder import ClientEmbedder
        from docrag.providers.litellm import LiteLLMEmbeddingClient

        embedding_client = LiteLLMEmbeddingClient(
            model=self.embedding,
            num_retries=settings.num_retries,
            api_key=self.embedding_api_key,
        )
        return ClientEmbedder(
            embedding_client=embedding_client,
            batch_size=settings.embedding_batch_size,
        )

    def build_llm_client(self, settings: Settings | None = None) -> LLMClient:
        """Build a LiteLLMClient for answer synthesis.

        Args:
            settings: Optional settings containing num_retries. If None,
                     uses default retry value.
        """
        from docrag.providers.litellm import LiteLLMClient

        num_retries = settings.num_retries if settings else 3
        return LiteLLMClient(model=self.llm, num_retries=num_retries, api_key=self.llm_api_key)
