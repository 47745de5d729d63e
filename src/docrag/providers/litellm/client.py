# src/docrag/providers/litellm/client.py
"""LiteLLM client implementations for completion and embedding APIs."""

import logging
from typing import Any

import litellm

from docrag.providers.base import EmbeddingClient, LLMClient
from docrag.providers.litellm.models import ChatModels, EmbeddingModels

logger = logging.getLogger(__name__)


class LiteLLMClient(LLMClient):
    """LiteLLM-based client for text generation.

    Supports any model available through LiteLLM (OpenAI, Anthropic, Gemini,
    Ollama, etc.).

    Example:
        from docrag.providers.litellm import LiteLLMClient, ChatModels

        client = LiteLLMClient(model=ChatModels.GPT_4O_MINI)
        response = client.complete([{"role": "user", "content": "Hello"}])
    """

    def __init__(
        self,
        model: str = ChatModels.GPT_4O_MINI,
        num_retries: int = 3,
        api_key: str | None = None,
    ) -> None:
        """Initialize the LiteLLM client.

        Args:
            model: LiteLLM model identifier.
                   Examples: "openai/gpt-4o-mini", "anthropic/claude-haiku-4-5-20251001"
            num_retries: Number of retries on rate limit errors. LiteLLM handles
                        exponential backoff automatically. Default: 3.
            api_key: Optional API key. If None, LiteLLM reads the provider's
                     standard environment variable (e.g. OPENAI_API_KEY).
        """
        self.model = model
        self.num_retries = num_retries
        self.api_key = api_key

    def complete(
        self,
        messages: list[dict],
        temperature: float | None = None,
    ) -> str:
        """Generate a completion using LiteLLM."""
        completion_kwargs: dict[str, Any] = {
            "model": self.model,
            "messages": messages,
            "drop_params": True,
            "num_retries": self.num_retries,
        }
        if temperature is not None:
            completion_kwargs["temperature"] = temperature
        if self.api_key:
            completion_kwargs["api_key"] = self.api_key

        logger.debug("Requesting completion from %s", self.model)
        response = litellm.completion(**completion_kwargs)

        if not response.choices:
            raise ValueError(f"LLM returned no choices for model {self.model}")
        content = response.choices[0].message.content
        if content is None:
            raise ValueError(f"LLM returned None content for model {self.model}")
        return str(content)


class LiteLLMEmbeddingClient(EmbeddingClient):
    """LiteLLM-based embedding client.

    Example:
        from docrag.providers.litellm import LiteLLMEmbeddingClient, EmbeddingModels

        client = LiteLLMEmbeddingClient(model=EmbeddingModels.TEXT_3_SMALL)
        embeddings = client.embed(["Hello world", "How are you?"])
    """

    def __init__(
        self,
        model: str = EmbeddingModels.TEXT_3_SMALL,
        num_retries: int = 3,
        api_key: str | None = None,
    ) -> None:
        """Initialize the LiteLLM embedding client.

        Args:
            model: LiteLLM embedding model identifier.
                   Examples: "openai/text-embedding-3-small", "gemini/gemini-embedding-001"
            num_retries: Number of retries on rate limit errors. Default: 3.
            api_key: Optional API key. If None, LiteLLM reads it from the environment.
        """
        self.model = model
        self.num_retries = num_retries
        self.api_key = api_key

    def embed(self, texts: list[str]) -> list[list[float]]:
        """Generate embeddings using LiteLLM."""
        if not texts:
            return []

        embedding_kwargs: dict[str, Any] = {
            "model": self.model,
            "input": texts,
            "num_retries": self.num_retries,
        }
        if self.api_key:
            embedding_kwargs["api_key"] = self.api_key

        logger.debug("Requesting %d embeddings from %s", len(texts), self.model)
        response = litellm.embedding(**embedding_kwargs)
        # Sort by index to maintain order
        sorted_data = sorted(response.data, key=lambda x: x["index"])
        return [item["embedding"] for item in sorted_data]
