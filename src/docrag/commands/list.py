# src/docrag/commands/list.py
"""List command - list stored documents."""

from __future__ import annotations

import os
from pathlib import Path

from docrag.commands.base import DocumentInfo, ListResult
from docrag.config import get_library, resolve_data_dir


def list_documents(
    data_dir: str | None = None,
    config_path: str | Path | None = None,
) -> ListResult:
    """List all stored documents.

    Args:
        data_dir: Override data directory
        config_path: Override config file path

    Returns:
        ListResult with document information
    """
    effective_data_dir = resolve_data_dir(data_dir, config_path)

    if not os.path.exists(effective_data_dir):
        return ListResult(success=True, documents=[])

    try:
        library = get_library(effective_data_dir)
    except OSError as e:
        return ListResult(success=False, error=f"Failed to access database: {e}")

    result = ListResult(success=True)
    for document in library.list_documents():
        source = document.metadata.get("source")
        result.documents.append(
            DocumentInfo(
                name=document.name,
                chunk_count=len(document.chunks),
                text_length=len(document.text),
                created_at=document.created_at,
                source=str(source) if source is not None else None,
            )
        )

    return result
