# src/docrag/models/source.py
"""Loaded source data model."""

from typing import Any

from pydantic import BaseModel, Field


class SourceDocument(BaseModel):
    """Raw text loaded from a file or URL, before chunking."""

    text: str
    source: str
    metadata: dict[str, Any] = Field(default_factory=dict)
