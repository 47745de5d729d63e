# src/docrag/commands/query.py
"""Query command - answer a question from stored documents.

This module provides the core query logic that the CLI and the
interactive shell both use.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from docrag.commands.base import QueryResult, SearchResult
from docrag.config import ConfigError, create_docrag, get_docrag_config
from docrag.exceptions import DocRAGError, DocumentNotFoundError

if TYPE_CHECKING:
    from docrag import DocRAG
    from docrag.providers import LLMClient

logger = logging.getLogger(__name__)


def query(
    question: str,
    document: str | None = None,
    k: int | None = None,
    raw: bool = False,
    data_dir: str | None = None,
    config_path: str | Path | None = None,
) -> QueryResult:
    """Answer a question from one document or from all documents.

    Args:
        question: The question to ask
        document: Document to search (None searches every document)
        k: Number of chunks to retrieve (None for the configured default)
        raw: If True, return the retrieved chunks without LLM synthesis
        data_dir: Override data directory
        config_path: Override config file path

    Returns:
        QueryResult with answer and sources
    """
    if not question or not question.strip():
        return QueryResult(success=False, query=question, error="Question cannot be empty")

    config = get_docrag_config(data_dir, config_path)
    if isinstance(config, ConfigError):
        return QueryResult(success=False, query=question, error=config.message)

    try:
        rag = create_docrag(config)
    except (DocRAGError, ValueError, OSError) as e:
        return QueryResult(success=False, query=question, error=f"Failed to open library: {e}")

    return query_with_docrag(rag, question, document=document, k=k, raw=raw)


def query_with_docrag(
    rag: DocRAG,
    question: str,
    document: str | None = None,
    k: int | None = None,
    raw: bool = False,
    llm_client: LLMClient | None = None,
) -> QueryResult:
    """Query using an existing DocRAG instance.

    Args:
        rag: Existing DocRAG instance
        question: The question to ask
        document: Document to search (None searches every document)
        k: Number of chunks to retrieve
        raw: If True, don't use LLM synthesis
        llm_client: Optional LLM client. If None, one is built from the provider.

    Returns:
        QueryResult with answer and sources
    """
    if k is not None and k < 0:
        return QueryResult(
            success=False, query=question, document=document, error=f"k must be >= 0, got {k}"
        )

    retriever = rag.retriever(default_k=k, llm_client=llm_client, use_llm=not raw)

    try:
        response = retriever.get_answer(question, document=document)
    except DocumentNotFoundError as e:
        return QueryResult(success=False, query=question, document=document, error=str(e))
    except Exception as e:
        logger.exception("Query failed")
        return QueryResult(
            success=False, query=question, document=document, error=f"Query failed: {e}"
        )

    return QueryResult(
        success=True,
        query=question,
        document=document,
        answer=response.answer,
        results=[
            SearchResult(
                document=r.document,
                index=r.index,
                content=r.content,
                score=r.score,
            )
            for r in response.results
        ],
    )
