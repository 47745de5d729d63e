# src/docrag/commands/add.py
"""Add command - chunk, embed and store a document.

This module provides the add logic that the CLI and the interactive
shell both use.
"""

from __future__ import annotations

import logging
from pathlib import Path

from docrag.commands.base import (
    AddResult,
    CommandStage,
    ProgressCallback,
    ProgressUpdate,
)
from docrag.config import ConfigError, create_docrag, get_docrag_config
from docrag.exceptions import DocRAGError

logger = logging.getLogger(__name__)

# Map ingestor event names to CommandStage
STAGE_MAP = {
    "chunking": CommandStage.CHUNKING,
    "embedding": CommandStage.EMBEDDING,
    "storing": CommandStage.STORING,
}


def add(
    name: str,
    location: str | None = None,
    text: str | None = None,
    essay: bool = False,
    chunk_size: int | None = None,
    data_dir: str | None = None,
    config_path: str | Path | None = None,
    on_progress: ProgressCallback | None = None,
) -> AddResult:
    """Add a document to the library.

    Exactly one source must be given: a file path or URL (location),
    inline text, or essay=True for the sample essay.

    Args:
        name: Name to store the document under (replaces an existing one)
        location: File path or http(s) URL
        text: Inline document text
        essay: Fetch the sample essay
        chunk_size: Override the configured chunk size
        data_dir: Override data directory
        config_path: Override config file path
        on_progress: Callback for progress updates

    Returns:
        AddResult with chunk statistics
    """
    from docrag.loaders import SAMPLE_ESSAY_URL

    if not name or not name.strip():
        return AddResult(success=False, error="Document name cannot be empty")

    sources = [s for s in (location, text, SAMPLE_ESSAY_URL if essay else None) if s is not None]
    if len(sources) != 1:
        return AddResult(
            success=False,
            name=name,
            error="Provide exactly one of a file path, URL, text or the sample essay",
        )
    if essay:
        location = SAMPLE_ESSAY_URL

    if chunk_size is not None and chunk_size <= 0:
        return AddResult(
            success=False, name=name, error=f"Chunk size must be positive, got {chunk_size}"
        )

    config = get_docrag_config(data_dir, config_path)
    if isinstance(config, ConfigError):
        return AddResult(success=False, name=name, error=config.message)

    try:
        rag = create_docrag(config)
    except (DocRAGError, ValueError, OSError) as e:
        return AddResult(success=False, name=name, error=f"Failed to open library: {e}")

    def progress(event: str, current: int, total: int, message: str) -> None:
        if on_progress:
            stage = STAGE_MAP.get(event, CommandStage.PROCESSING)
            on_progress(ProgressUpdate(stage=stage, current=current, total=total, message=message))

    replaced = name in rag.library

    try:
        if location is not None:
            if on_progress:
                on_progress(ProgressUpdate(CommandStage.LOADING, 0, 0, f"Loading {location}..."))
            document = rag.ingest_location(
                name, location, chunk_size=chunk_size, on_progress=progress
            )
            source = location
        else:
            document = rag.ingest_text(
                name, text or "", chunk_size=chunk_size, on_progress=progress
            )
            source = "text"
    except (DocRAGError, ValueError) as e:
        logger.error("Failed to add %r: %s", name, e)
        return AddResult(success=False, name=name, source=location, error=str(e))

    if on_progress:
        on_progress(ProgressUpdate(CommandStage.COMPLETE, 1, 1, f"Added {name}"))

    return AddResult(
        success=True,
        name=name,
        source=source,
        chunks=len(document.chunks),
        characters=len(document.text),
        replaced=replaced,
    )
