# src/docrag/embedder/__init__.py
"""Embedding functionality for docrag.

This module exports:
- Embedder: Abstract base class for embedders
- ClientEmbedder: Embedder backed by any EmbeddingClient

Example:
    from docrag.providers.litellm import LiteLLMEmbeddingClient
    from docrag.embedder import ClientEmbedder

    client = LiteLLMEmbeddingClient(model="openai/text-embedding-3-small")
    embedder = ClientEmbedder(embedding_client=client)
"""

from docrag.embedder.base import BatchCallback, Embedder
from docrag.embedder.client import ClientEmbedder

__all__ = ["BatchCallback", "Embedder", "ClientEmbedder"]
