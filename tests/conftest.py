"""Shared pytest fixtures."""

import os
import tempfile
from dataclasses import dataclass
from typing import Any
from unittest.mock import MagicMock, patch

import pytest

# Each keyword is one dimension of the fake embedding space
KEYWORDS = ["python", "java", "cooking", "music"]


def keyword_vector(text: str) -> list[float]:
    """Deterministic embedding: how often each keyword appears in the text."""
    lowered = text.lower()
    return [float(lowered.count(word)) for word in KEYWORDS]


@pytest.fixture
def temp_dir():
    """Create a temporary directory for stores."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield tmpdir


@pytest.fixture
def mock_embedder():
    """Create a mock embedder with keyword-count vectors."""
    from docrag.embedder import Embedder

    class MockEmbedder(Embedder):
        """Mock embedder that counts keywords."""

        def __init__(self) -> None:
            self.calls: list[list[str]] = []

        def embed_text(self, text: str) -> list[float]:
            self.calls.append([text])
            return keyword_vector(text)

        def embed_texts(self, texts, on_batch=None):
            self.calls.append(list(texts))
            vectors = [keyword_vector(t) for t in texts]
            if on_batch and texts:
                on_batch(len(texts), len(texts))
            return vectors

    return MockEmbedder()


@pytest.fixture
def mock_llm_client():
    """Create a mock LLM client that records prompts."""
    from docrag.providers import LLMClient

    class MockLLMClient(LLMClient):
        def __init__(self) -> None:
            self.messages: list[list[dict]] = []
            self.temperatures: list[float | None] = []

        def complete(self, messages: list[dict], temperature: float | None = None) -> str:
            self.messages.append(messages)
            self.temperatures.append(temperature)
            return "  Mock answer.  "

    return MockLLMClient()


@pytest.fixture
def mock_provider(mock_embedder, mock_llm_client):
    """Create a mock provider satisfying the ProviderConfig protocol."""

    @dataclass(frozen=True)
    class MockProvider:
        _embedder: Any
        _llm_client: Any

        def build_embedder(self, settings: Any) -> Any:
            return self._embedder

        def build_llm_client(self, settings: Any = None) -> Any:
            return self._llm_client

    return MockProvider(_embedder=mock_embedder, _llm_client=mock_llm_client)


@pytest.fixture
def store(temp_dir):
    from docrag.stores import SQLiteDocumentStore

    return SQLiteDocumentStore(os.path.join(temp_dir, "documents.db"))


@pytest.fixture
def library(store):
    from docrag.library import DocumentLibrary

    return DocumentLibrary(store)


@pytest.fixture
def rag(mock_provider, store):
    from docrag import DocRAG

    return DocRAG(provider=mock_provider, store=store)


@pytest.fixture
def fake_litellm():
    """Patch LiteLLM so the real provider runs without network access.

    Embeddings are keyword-count vectors; completions return "Mock answer."
    """

    def fake_embedding(model, input, **kwargs):
        return MagicMock(
            data=[{"embedding": keyword_vector(text), "index": i} for i, text in enumerate(input)]
        )

    completion_response = MagicMock()
    completion_response.choices = [MagicMock(message=MagicMock(content="Mock answer."))]

    with (
        patch(
            "docrag.providers.litellm.client.litellm.embedding", side_effect=fake_embedding
        ) as embedding,
        patch(
            "docrag.providers.litellm.client.litellm.completion",
            return_value=completion_response,
        ) as completion,
    ):
        yield {"embedding": embedding, "completion": completion}


@pytest.fixture
def clean_env(monkeypatch, temp_dir):
    """Run in an empty directory with no DOCRAG_* variables set."""
    for key in list(os.environ):
        if key.startswith("DOCRAG_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(temp_dir)
    return temp_dir
