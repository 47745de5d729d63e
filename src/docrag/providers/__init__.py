# src/docrag/providers/__init__.py
"""Provider implementations for docrag.

- LLMClient: Abstract base class for completion providers
- EmbeddingClient: Abstract base class for embedding providers
- LiteLLM implementations of both

Usage:
    from docrag.providers import LLMClient, EmbeddingClient
    from docrag.providers.litellm import LiteLLMClient, ChatModels
"""

from docrag.providers.base import EmbeddingClient, LLMClient
from docrag.providers.litellm import (
    ChatModels,
    EmbeddingModels,
    LiteLLMClient,
    LiteLLMEmbeddingClient,
)

__all__ = [
    # ABCs
    "LLMClient",
    "EmbeddingClient",
    # Model constants
    "ChatModels",
    "EmbeddingModels",
    # LiteLLM clients
    "LiteLLMClient",
    "LiteLLMEmbeddingClient",
]
