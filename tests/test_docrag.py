"""Tests for the DocRAG central class."""

import os

import pytest

from docrag import DocRAG, LocalStorage, Settings
from docrag.exceptions import LoaderError
from docrag.ingestor import Ingestor
from docrag.retriever import Retriever
from docrag.stores import SQLiteDocumentStore


class TestDocRAGInit:
    def test_with_store(self, mock_provider, store):
        rag = DocRAG(provider=mock_provider, store=store)
        assert rag.library.store is store
        assert rag.settings == Settings()
        assert rag.chunker.chunk_size == 2048

    def test_with_storage_bundle(self, mock_provider, temp_dir):
        data_dir = os.path.join(temp_dir, "data")
        rag = DocRAG(provider=mock_provider, storage=LocalStorage(data_dir))

        assert isinstance(rag.library.store, SQLiteDocumentStore)
        assert os.path.exists(os.path.join(data_dir, "documents.db"))

    def test_requires_storage(self, mock_provider):
        with pytest.raises(ValueError, match="Must provide"):
            DocRAG(provider=mock_provider)

    def test_rejects_both(self, mock_provider, store, temp_dir):
        with pytest.raises(ValueError, match="Cannot mix"):
            DocRAG(provider=mock_provider, storage=LocalStorage(temp_dir), store=store)

    def test_settings_applied(self, mock_provider, store):
        rag = DocRAG(provider=mock_provider, store=store, settings=Settings(chunk_size=100))
        assert rag.chunker.chunk_size == 100


class TestDocRAGFactories:
    def test_ingestor(self, rag):
        ingestor = rag.ingestor()
        assert isinstance(ingestor, Ingestor)
        assert ingestor.library is rag.library
        assert rag.ingestor(chunk_size=10).chunker.chunk_size == 10

    def test_retriever_uses_settings(self, mock_provider, store):
        rag = DocRAG(
            provider=mock_provider,
            store=store,
            settings=Settings(default_k=4, synthesis_temperature=0.7),
        )
        retriever = rag.retriever()

        assert isinstance(retriever, Retriever)
        assert retriever.default_k == 4
        assert retriever.synthesis_temperature == 0.7

    def test_retriever_overrides(self, rag):
        assert rag.retriever(default_k=1).default_k == 1

    def test_retriever_without_llm(self, rag):
        rag.ingest_text("notes", "Python rules.")
        response = rag.retriever(use_llm=False).get_answer("python")
        assert response.answer is None
        assert len(response.results) == 1

    def test_retriever_builds_llm_from_provider(self, rag, mock_llm_client):
        rag.ingest_text("notes", "Python rules.")
        response = rag.retriever().get_answer("python")
        assert response.answer == "Mock answer."
        assert len(mock_llm_client.messages) == 1


class TestDocRAGDocuments:
    def test_ingest_text_and_list(self, rag):
        doc = rag.ingest_text("notes", "Python.\n\nJava.", metadata={"k": "v"})

        assert [d.name for d in rag.list_documents()] == ["notes"]
        assert doc.metadata == {"k": "v"}

    def test_ingest_location(self, rag, temp_dir):
        path = os.path.join(temp_dir, "notes.md")
        with open(path, "w", encoding="utf-8") as f:
            f.write("# Python\n\nMusic and cooking.")

        doc = rag.ingest_location("notes", path)

        assert doc.chunk_texts == ["# Python\n\nMusic and cooking."]
        assert doc.metadata["type"] == "markdown"
        assert doc.metadata["source"] == os.path.realpath(path)

    def test_ingest_location_missing_file(self, rag, temp_dir):
        with pytest.raises(LoaderError):
            rag.ingest_location("notes", os.path.join(temp_dir, "missing.txt"))

    def test_ingest_location_unsupported(self, rag):
        with pytest.raises(ValueError, match="No loader"):
            rag.ingest_location("notes", "archive.zip")

    def test_remove_document(self, rag):
        rag.ingest_text("notes", "Python.")
        assert rag.remove_document("notes") is True
        assert rag.remove_document("notes") is False
        assert rag.list_documents() == []

    def test_documents_survive_restart(self, mock_provider, store):
        DocRAG(provider=mock_provider, store=store).ingest_text("notes", "Python.")

        reopened = DocRAG(provider=mock_provider, store=store)

        assert [d.name for d in reopened.list_documents()] == ["notes"]
