# src/docrag/providers/litellm/models.py
"""Curated model constants for the LiteLLM provider.

Any valid LiteLLM model string can be passed instead.

Example:
    from docrag.providers.litellm import ChatModels, LiteLLMClient

    llm_client = LiteLLMClient(model=ChatModels.GPT_4O_MINI)
    llm_client = LiteLLMClient(model="my-custom/model")
"""


class ChatModels:
    """Chat/completion models for answer synthesis (via LiteLLMClient)."""

    # OpenAI
    GPT_4O_MINI = "openai/gpt-4o-mini"
    GPT_4O = "openai/gpt-4o"
    GPT_5_MINI = "openai/gpt-5-mini"

    # Anthropic
    CLAUDE_SONNET_45 = "anthropic/claude-sonnet-4-5-20250929"
    CLAUDE_HAIKU_45 = "anthropic/claude-haiku-4-5-20251001"

    # Google Gemini
    GEMINI_3_FLASH = "gemini/gemini-3-flash-preview"

    # Local
    OLLAMA_LLAMA_32 = "ollama/llama3.2"


class EmbeddingModels:
    """Embedding models for LiteLLMEmbeddingClient / ClientEmbedder."""

    # OpenAI
    TEXT_3_SMALL = "openai/text-embedding-3-small"
    TEXT_3_LARGE = "openai/text-embedding-3-large"

    # Google Gemini
    GEMINI_EMBEDDING_001 = "gemini/gemini-embedding-001"

    # Local
    OLLAMA_NOMIC = "ollama/nomic-embed-text"
