# src/docrag/commands/__init__.py
"""UI-agnostic command layer for docrag.

This module provides command functions that the CLI and the interactive
shell call. Commands return data structures, allowing UIs to render
results appropriately.

Usage:
    from docrag.commands import add, query

    result = add.add("essay", essay=True, on_progress=my_callback)
    result = query.query("What did the author work on?", document="essay")
"""

from docrag.commands import add, config_cmd, query, remove
from docrag.commands import list as list_cmd
from docrag.commands.base import (
    AddResult,
    CommandResult,
    CommandStage,
    ConfigResult,
    ConfirmCallback,
    ConfirmRequest,
    DocumentInfo,
    ListResult,
    ProgressCallback,
    ProgressUpdate,
    QueryResult,
    RemoveResult,
    SearchResult,
    SettingInfo,
)

__all__ = [
    # Base types
    "CommandStage",
    "ProgressUpdate",
    "ProgressCallback",
    "ConfirmRequest",
    "ConfirmCallback",
    "CommandResult",
    # Result types
    "AddResult",
    "QueryResult",
    "SearchResult",
    "ListResult",
    "DocumentInfo",
    "RemoveResult",
    "ConfigResult",
    "SettingInfo",
    # Command modules
    "add",
    "query",
    "list_cmd",
    "remove",
    "config_cmd",
]
