# src/docrag/configuration/__init__.py
"""Configuration objects for docrag.

Instead of factory methods, you pass configuration objects that know how
to build their components.

Provider configurations (build embedder and LLM client):
- LiteLLMProvider: Uses LiteLLM for completion and embedding calls

Storage configurations (build the document store):
- LocalStorage: SQLite under a local data directory

Example:
    from docrag import DocRAG, LiteLLMProvider, LocalStorage

    rag = DocRAG(
        provider=LiteLLMProvider(llm="openai/gpt-4o-mini", embedding="openai/text-embedding-3-small"),
        storage=LocalStorage("./docrag_data"),
    )
"""

from docrag.configuration.base import ProviderConfig, StorageConfig
from docrag.configuration.providers import LiteLLMProvider
from docrag.configuration.storage import LocalStorage

__all__ = [
    "ProviderConfig",
    "StorageConfig",
    "LiteLLMProvider",
    "LocalStorage",
]
