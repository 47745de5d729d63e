# src/docrag/commands/remove.py
"""Remove command - delete a document from the library.

Uses a callback for interactive confirmation, so each UI can implement
its own confirmation method.
"""

from __future__ import annotations

import os
from pathlib import Path

from docrag.commands.base import ConfirmCallback, ConfirmRequest, RemoveResult
from docrag.config import get_library, resolve_data_dir


def remove(
    name: str,
    data_dir: str | None = None,
    config_path: str | Path | None = None,
    on_confirm: ConfirmCallback | None = None,
) -> RemoveResult:
    """Remove a document and its chunks.

    Args:
        name: Name of the document to remove
        data_dir: Override data directory
        config_path: Override config file path
        on_confirm: Optional confirmation callback. Return True to proceed.
            If None, removal proceeds without confirmation (like --force).

    Returns:
        RemoveResult with removal statistics, or cancelled result
    """
    effective_data_dir = resolve_data_dir(data_dir, config_path)

    if not os.path.exists(effective_data_dir):
        return RemoveResult(success=False, name=name, error=f"Document not found: {name}")

    try:
        library = get_library(effective_data_dir)
    except OSError as e:
        return RemoveResult(success=False, name=name, error=f"Failed to access database: {e}")

    document = library.get(name)
    if document is None:
        return RemoveResult(success=False, name=name, error=f"Document not found: {name}")

    chunk_count = len(document.chunks)

    if on_confirm is not None:
        request = ConfirmRequest(
            message=f"Remove {name}?",
            details=f"This will remove {chunk_count} chunks from the database.",
        )
        if not on_confirm(request):
            return RemoveResult(success=False, name=name, error="Cancelled.")

    library.remove(name)

    return RemoveResult(success=True, name=name, chunks_removed=chunk_count)
