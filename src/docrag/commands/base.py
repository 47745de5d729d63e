# src/docrag/commands/base.py
"""Base types for the commands layer.

This module defines the data structures used by all commands:
- Progress callbacks for long-running operations
- Confirmation callbacks for destructive commands
- Result types for each command
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class CommandStage(Enum):
    """Stages of command execution for progress reporting."""

    # Add stages
    LOADING = "Loading"
    CHUNKING = "Chunking"
    EMBEDDING = "Embedding"
    STORING = "Storing"

    # Query stages
    RETRIEVING = "Retrieving"
    GENERATING = "Generating"

    # General stages
    PROCESSING = "Processing"
    COMPLETE = "Complete"


@dataclass
class ProgressUpdate:
    """Progress update for long-running operations.

    Attributes:
        stage: Current stage of the operation
        current: Current item number
        total: Total number of items (0 for indeterminate)
        message: Optional status message
    """

    stage: CommandStage
    current: int
    total: int
    message: str | None = None

    @property
    def is_indeterminate(self) -> bool:
        """True if progress is indeterminate (total unknown)."""
        return self.total == 0

    @property
    def percentage(self) -> int:
        """Progress as percentage (0-100). Returns 0 if indeterminate."""
        if self.total == 0:
            return 0
        return int(100 * self.current / self.total)


ProgressCallback = Callable[[ProgressUpdate], None]


@dataclass
class ConfirmRequest:
    """Request for a yes/no confirmation before a destructive action."""

    message: str
    details: str | None = None


# Returns True to proceed
ConfirmCallback = Callable[[ConfirmRequest], bool]


@dataclass
class CommandResult:
    """Base result type for commands."""

    success: bool
    error: str | None = None


@dataclass
class AddResult(CommandResult):
    """Result of the add command.

    Attributes:
        name: Name the document was stored under
        source: File path, URL or "text" for inline text
        chunks: Number of chunks created
        characters: Length of the document text
        replaced: True if a document with the same name was replaced
    """

    name: str = ""
    source: str | None = None
    chunks: int = 0
    characters: int = 0
    replaced: bool = False


@dataclass
class SearchResult:
    """A single retrieved chunk."""

    document: str
    index: int
    content: str
    score: float


@dataclass
class QueryResult(CommandResult):
    """Result of the query command.

    Attributes:
        query: The original query
        document: Document that was searched (None for all documents)
        answer: Synthesized answer (None in raw mode or with no results)
        results: Retrieved chunks, best first
    """

    query: str = ""
    document: str | None = None
    answer: str | None = None
    results: list[SearchResult] = field(default_factory=list)


@dataclass
class DocumentInfo:
    """Information about a stored document."""

    name: str
    chunk_count: int
    text_length: int
    created_at: datetime | None = None
    source: str | None = None


@dataclass
class ListResult(CommandResult):
    """Result of the list command."""

    documents: list[DocumentInfo] = field(default_factory=list)


@dataclass
class RemoveResult(CommandResult):
    """Result of the remove command."""

    name: str = ""
    chunks_removed: int = 0


@dataclass
class SettingInfo:
    """Information about a single setting."""

    name: str
    value: str
    source: str  # "env var", "yaml", "default"


@dataclass
class ConfigResult(CommandResult):
    """Result of the config command.

    Attributes:
        provider: Provider type
        llm_model: LLM model name
        embedding_model: Embedding model name
        data_dir: Data directory path
        settings: List of behavioral settings with sources
        config_path: Path to config file (if found)
    """

    provider: str = "litellm"
    llm_model: str | None = None
    embedding_model: str | None = None
    data_dir: str = ""
    settings: list[SettingInfo] = field(default_factory=list)
    config_path: str | None = None
