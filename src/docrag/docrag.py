# src/docrag/docrag.py
"""Central configuration class for docrag."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from docrag.configuration import ProviderConfig, StorageConfig
    from docrag.ingestor import Ingestor, ProgressCallback
    from docrag.loaders import LoaderRegistry
    from docrag.models import Document
    from docrag.providers import LLMClient
    from docrag.retriever import Retriever
    from docrag.stores import DocumentStore

from docrag.chunker import ParagraphChunker
from docrag.library import DocumentLibrary
from docrag.settings import Settings


class DocRAG:
    """Central configuration for docrag components.

    DocRAG bundles the document library, embedder and chunker so you can
    configure once and create Ingestors/Retrievers from it.

    Either a storage bundle or an explicit store must be given:

        from docrag import DocRAG, LiteLLMProvider, LocalStorage

        rag = DocRAG(
            provider=LiteLLMProvider(
                llm="openai/gpt-4o-mini",
                embedding="openai/text-embedding-3-small",
            ),
            storage=LocalStorage("./docrag_data"),
        )
        rag.ingest_location("essay", SAMPLE_ESSAY_URL)
        response = rag.retriever().get_answer("What did the author work on?")

        rag = DocRAG(provider=..., store=SQLiteDocumentStore("./docs.db"))
    """

    def __init__(
        self,
        *,
        provider: ProviderConfig,
        storage: StorageConfig | None = None,
        store: DocumentStore | None = None,
        settings: Settings | None = None,
        loader_registry: LoaderRegistry | None = None,
    ) -> None:
        """Create a DocRAG instance.

        Args:
            provider: Provider configuration (builds embedder and LLM client).
            storage: Storage bundle. Mutually exclusive with store.
            store: Explicit document store.
            settings: Behavioral settings (chunk_size, default_k, etc.)
            loader_registry: Optional loader registry. If None, uses default.

        Raises:
            ValueError: If neither or both of storage and store are provided.
        """
        self._settings = settings if settings is not None else Settings()

        if storage is not None and store is not None:
            raise ValueError("Cannot mix 'storage' bundle with an explicit store")
        if storage is not None:
            store = storage.build_store()
        if store is None:
            raise ValueError("Must provide either 'storage' bundle or an explicit 'store'")

        self._provider = provider
        self.library = DocumentLibrary(store)
        self.embedder = provider.build_embedder(self._settings)
        self.chunker = ParagraphChunker(self._settings.chunk_size)
        self._loader_registry = loader_registry

    @property
    def settings(self) -> Settings:
        return self._settings

    def _get_loader_registry(self) -> LoaderRegistry:
        """Get or create the loader registry."""
        if self._loader_registry is None:
            from docrag.loaders import LoaderRegistry

            self._loader_registry = LoaderRegistry.default()
        return self._loader_registry

    def ingestor(self, *, chunk_size: int | None = None) -> Ingestor:
        """Create an Ingestor writing into this instance's library.

        Args:
            chunk_size: Override the configured chunk size for this ingestor.
        """
        from docrag.ingestor import Ingestor

        chunker = self.chunker if chunk_size is None else ParagraphChunker(chunk_size)
        return Ingestor(library=self.library, chunker=chunker, embedder=self.embedder)

    def retriever(
        self,
        *,
        llm_client: LLMClient | None = None,
        use_llm: bool = True,
        synthesis_prompt: str | None = None,
        synthesis_temperature: float | None = None,
        default_k: int | None = None,
    ) -> Retriever:
        """Create a Retriever over this instance's library.

        Args:
            llm_client: LLM client for answer synthesis. If None and use_llm
                        is True, one is built from the provider.
            use_llm: Set False to retrieve chunks without synthesis.
            synthesis_prompt: Custom synthesis prompt template.
            synthesis_temperature: Temperature for synthesis LLM calls.
            default_k: Number of chunks to return. If None, uses settings default.
        """
        from docrag.retriever import Retriever

        if llm_client is None and use_llm:
            llm_client = self._provider.build_llm_client(self._settings)

        return Retriever(
            library=self.library,
            embedder=self.embedder,
            default_k=default_k if default_k is not None else self._settings.default_k,
            llm_client=llm_client if use_llm else None,
            synthesis_prompt=synthesis_prompt or self._settings.synthesis_prompt,
            synthesis_temperature=(
                synthesis_temperature
                if synthesis_temperature is not None
                else self._settings.synthesis_temperature
            ),
        )

    def ingest_text(
        self,
        name: str,
        text: str,
        metadata: dict[str, Any] | None = None,
        *,
        chunk_size: int | None = None,
        on_progress: ProgressCallback | None = None,
    ) -> Document:
        """Chunk, embed and store a text under the given name."""
        return self.ingestor(chunk_size=chunk_size).ingest_text(
            name, text, metadata=metadata, on_progress=on_progress
        )

    def ingest_location(
        self,
        name: str,
        location: str,
        *,
        chunk_size: int | None = None,
        on_progress: ProgressCallback | None = None,
    ) -> Document:
        """Load a file or URL and ingest it under the given name.

        Raises:
            LoaderError: If the location cannot be read
            ValueError: If no loader supports the location
        """
        source = self._get_loader_registry().load(location)
        return self.ingestor(chunk_size=chunk_size).ingest_source(
            name, source, on_progress=on_progress
        )

    def list_documents(self) -> list[Document]:
        return self.library.list_documents()

    def remove_document(self, name: str) -> bool:
        """Remove a document. Returns True if it existed."""
        return self.library.remove(name)
