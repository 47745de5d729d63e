"""Tests for the embedder."""

from unittest.mock import MagicMock

import pytest

from docrag.embedder import ClientEmbedder, Embedder
from docrag.exceptions import EmbeddingError
from docrag.providers import EmbeddingClient


class FakeEmbeddingClient(EmbeddingClient):
    """Returns [len(text), position-in-batch] for each text."""

    def __init__(self) -> None:
        self.batches: list[list[str]] = []

    def embed(self, texts: list[str]) -> list[list[float]]:
        self.batches.append(list(texts))
        return [[float(len(t)), float(i)] for i, t in enumerate(texts)]


class TestClientEmbedder:
    def test_is_embedder(self):
        assert isinstance(ClientEmbedder(FakeEmbeddingClient()), Embedder)

    def test_embed_text(self):
        embedder = ClientEmbedder(FakeEmbeddingClient())
        assert embedder.embed_text("hello") == [5.0, 0.0]

    def test_embed_texts_batches_in_order(self):
        client = FakeEmbeddingClient()
        embedder = ClientEmbedder(client, batch_size=2)

        vectors = embedder.embed_texts(["a", "bb", "ccc", "dddd", "eeeee"])

        assert client.batches == [["a", "bb"], ["ccc", "dddd"], ["eeeee"]]
        assert [v[0] for v in vectors] == [1.0, 2.0, 3.0, 4.0, 5.0]

    def test_on_batch_reports_progress(self):
        embedder = ClientEmbedder(FakeEmbeddingClient(), batch_size=2)
        calls = []

        embedder.embed_texts(
            ["a", "b", "c"], on_batch=lambda done, total: calls.append((done, total))
        )

        assert calls == [(2, 3), (3, 3)]

    def test_embed_texts_empty(self):
        client = FakeEmbeddingClient()
        assert ClientEmbedder(client).embed_texts([]) == []
        assert client.batches == []

    def test_embed_chunks(self):
        embedder = ClientEmbedder(FakeEmbeddingClient())
        chunks = embedder.embed_chunks(["first", "second"])
        assert [c.index for c in chunks] == [0, 1]
        assert [c.content for c in chunks] == ["first", "second"]
        assert chunks[1].embedding == [6.0, 1.0]

    def test_invalid_batch_size(self):
        with pytest.raises(ValueError):
            ClientEmbedder(FakeEmbeddingClient(), batch_size=0)

    def test_client_failure_wrapped(self):
        client = MagicMock(spec=EmbeddingClient)
        client.embed.side_effect = RuntimeError("rate limited")
        embedder = ClientEmbedder(client)

        with pytest.raises(EmbeddingError, match="rate limited") as exc_info:
            embedder.embed_text("hello")
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    def test_count_mismatch(self):
        client = MagicMock(spec=EmbeddingClient)
        client.embed.return_value = [[1.0]]
        embedder = ClientEmbedder(client)

        with pytest.raises(EmbeddingError, match="count mismatch"):
            embedder.embed_texts(["a", "b"])
