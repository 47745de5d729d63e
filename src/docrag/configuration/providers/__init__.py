# src/docrag/configuration/providers/__init__.py
"""Provider configurations for docrag."""

from docrag.configuration.providers.litellm import LiteLLMProvider

__all__ = ["LiteLLMProvider"]
