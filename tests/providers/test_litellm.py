"""Tests for the LiteLLM clients."""

from unittest.mock import MagicMock, patch

import pytest

from docrag.providers.litellm import (
    ChatModels,
    EmbeddingModels,
    LiteLLMClient,
    LiteLLMEmbeddingClient,
)


def _completion_response(content):
    response = MagicMock()
    response.choices = [MagicMock(message=MagicMock(content=content))]
    return response


class TestLiteLLMClient:
    def test_defaults(self):
        client = LiteLLMClient()
        assert client.model == ChatModels.GPT_4O_MINI
        assert client.num_retries == 3

    @patch("docrag.providers.litellm.client.litellm.completion")
    def test_complete(self, mock_completion):
        mock_completion.return_value = _completion_response("Hello!")
        client = LiteLLMClient(model="openai/gpt-4o-mini", num_retries=5)

        result = client.complete([{"role": "user", "content": "Hi"}], temperature=0.0)

        assert result == "Hello!"
        kwargs = mock_completion.call_args.kwargs
        assert kwargs["model"] == "openai/gpt-4o-mini"
        assert kwargs["num_retries"] == 5
        assert kwargs["temperature"] == 0.0
        assert kwargs["drop_params"] is True
        assert "api_key" not in kwargs

    @patch("docrag.providers.litellm.client.litellm.completion")
    def test_complete_passes_api_key(self, mock_completion):
        mock_completion.return_value = _completion_response("ok")
        LiteLLMClient(api_key="sk-test").complete([{"role": "user", "content": "Hi"}])
        assert mock_completion.call_args.kwargs["api_key"] == "sk-test"
        assert "temperature" not in mock_completion.call_args.kwargs

    @patch("docrag.providers.litellm.client.litellm.completion")
    def test_complete_none_content(self, mock_completion):
        mock_completion.return_value = _completion_response(None)
        with pytest.raises(ValueError):
            LiteLLMClient().complete([{"role": "user", "content": "Hi"}])


class TestLiteLLMEmbeddingClient:
    def test_defaults(self):
        assert LiteLLMEmbeddingClient().model == EmbeddingModels.TEXT_3_SMALL

    @patch("docrag.providers.litellm.client.litellm.embedding")
    def test_embed_sorts_by_index(self, mock_embedding):
        mock_embedding.return_value = MagicMock(
            data=[
                {"embedding": [0.0, 1.0], "index": 1},
                {"embedding": [1.0, 0.0], "index": 0},
            ]
        )
        client = LiteLLMEmbeddingClient(model="openai/text-embedding-3-small")

        result = client.embed(["first", "second"])

        assert result == [[1.0, 0.0], [0.0, 1.0]]
        kwargs = mock_embedding.call_args.kwargs
        assert kwargs["input"] == ["first", "second"]
        assert kwargs["model"] == "openai/text-embedding-3-small"

    @patch("docrag.providers.litellm.client.litellm.embedding")
    def test_embed_empty_skips_call(self, mock_embedding):
        assert LiteLLMEmbeddingClient().embed([]) == []
        mock_embedding.assert_not_called()
