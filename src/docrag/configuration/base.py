# src/docrag/configuration/base.py
"""Protocol definitions for configuration objects.

Provider and storage configurations are structural: any object with the
right builder methods (typically a frozen dataclass) satisfies them, so
vendors can be swapped without inheriting from a docrag class.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from docrag.embedder import Embedder
    from docrag.providers import LLMClient
    from docrag.settings import Settings
    from docrag.stores import DocumentStore


@runtime_checkable
class ProviderConfig(Protocol):
    """Protocol for provider configurations.

    Provider configurations build the external-service components:
    - Embedder: turns chunk and query text into vectors
    - LLMClient: completes the synthesis prompt

    Example implementation:
        @dataclass(frozen=True)
        class LiteLLMProvider:
            llm: str
            embedding: str

            def build_embedder(self, settings: Settings) -> Embedder: ...
            def build_llm_client(self, settings: Settings | None = None) -> LLMClient: ...
    """

    def build_embedder(self, settings: Settings) -> Embedder:
        """Build an embedder for chunk and query embeddings.

        Args:
            settings: Settings containing embedding_batch_size and num_retries.
        """
        ...

    def build_llm_client(self, settings: Settings | None = None) -> LLMClient:
        """Build an LLM client for answer synthesis."""
        ...


@runtime_checkable
class StorageConfig(Protocol):
    """Protocol for storage configurations.

    Example implementation:
        @dataclass(frozen=True)
        class LocalStorage:
            data_dir: str

            def build_store(self) -> DocumentStore: ...
    """

    def build_store(self) -> DocumentStore:
        """Build the document store."""
        ...
