# src/docrag/providers/litellm/__init__.py
"""LiteLLM provider clients for docrag.

Usage:
    from docrag.providers.litellm import LiteLLMClient, ChatModels

    client = LiteLLMClient(model=ChatModels.GPT_4O_MINI)
"""

from docrag.providers.litellm.client import LiteLLMClient, LiteLLMEmbeddingClient
from docrag.providers.litellm.models import ChatModels, EmbeddingModels

__all__ = [
    # Model constants
    "ChatModels",
    "EmbeddingModels",
    # Clients
    "LiteLLMClient",
    "LiteLLMEmbeddingClient",
]
