# src/docrag/models/results.py
"""Result data models for docrag queries."""

from pydantic import BaseModel


class RetrievedChunk(BaseModel):
    """A single chunk matched by a query."""

    document: str
    index: int
    content: str
    score: float


class QueryResponse(BaseModel):
    """Full response to a user query."""

    query: str
    answer: str | None
    results: list[RetrievedChunk]
    prompt: str | None = None
