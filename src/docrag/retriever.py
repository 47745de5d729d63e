# src/docrag/retriever.py
"""Retrieval pipeline for docrag."""

import logging

from docrag.embedder import Embedder
from docrag.library import DocumentLibrary
from docrag.models import Document, QueryResponse, RetrievedChunk
from docrag.providers import LLMClient

logger = logging.getLogger(__name__)

CONTEXT_SEPARATOR = "\n---------------------\n"

SYNTHESIS_PROMPT = """Context information is below.
---------------------
{context}

Given the context information and not prior knowledge, answer the query.
Query: {query}
Answer:"""


class Retriever:
    """Orchestrates the retrieval pipeline.

    A query is embedded once and searched against either one named
    document or every document in the library. The best chunks are
    formatted into a prompt and, if an LLM client is configured, sent
    for completion.
    """

    def __init__(
        self,
        library: DocumentLibrary,
        embedder: Embedder,
        default_k: int = 2,
        llm_client: LLMClient | None = None,
        synthesis_prompt: str | None = None,
        synthesis_temperature: float | None = 0.0,
    ) -> None:
        """Initialize the retriever.

        Args:
            library: Documents to search
            embedder: Embedder for the query text
            default_k: Default number of chunks to retrieve
            llm_client: LLM client for answer synthesis (optional)
            synthesis_prompt: Custom prompt template with {context} and {query}
            synthesis_temperature: Temperature for synthesis LLM calls
        """
        self.library = library
        self.embedder = embedder
        self.default_k = default_k
        self._llm_client = llm_client
        self.synthesis_prompt = synthesis_prompt or SYNTHESIS_PROMPT
        self.synthesis_temperature = synthesis_temperature

    def _search_document(
        self, document: Document, query_embedding: list[float], k: int
    ) -> list[RetrievedChunk]:
        matches = document.vector_index().search_with_scores(query_embedding, k)
        return [
            RetrievedChunk(
                document=document.name,
                index=index,
                content=document.chunks[index].content,
                score=score,
            )
            for index, score in matches
        ]

    def get_context(
        self,
        query: str,
        document: str | None = None,
        k: int | None = None,
    ) -> list[RetrievedChunk]:
        """Get the chunks most relevant to a query.

        Args:
            query: User's search query
            document: Name of the document to search. None searches all
                      documents and keeps the k best chunks overall.
            k: Number of chunks to return (default: self.default_k)

        Returns:
            List of RetrievedChunk ordered by descending score

        Raises:
            DocumentNotFoundError: If document is given but not in the library
            DimensionMismatchError: If the query embedding does not match a
                                    document's vectors
        """
        k = self.default_k if k is None else k

        targets = [self.library.require(document)] if document else self.library.list_documents()
        targets = [d for d in targets if d.chunks]
        if not targets or k == 0:
            return []

        query_embedding = self.embedder.embed_text(query)

        results: list[RetrievedChunk] = []
        for target in targets:
            results.extend(self._search_document(target, query_embedding, k))

        # Stable: ties keep document order, then rank within the document
        results.sort(key=lambda r: r.score, reverse=True)
        logger.debug(
            "Query matched %d chunks across %d documents", min(k, len(results)), len(targets)
        )
        return results[:k]

    def build_prompt(self, query: str, results: list[RetrievedChunk]) -> str:
        """Format retrieved chunks and the query into the synthesis prompt."""
        context = CONTEXT_SEPARATOR.join(r.content for r in results)
        return self.synthesis_prompt.format(context=context, query=query)

    def get_answer(
        self,
        query: str,
        document: str | None = None,
        k: int | None = None,
    ) -> QueryResponse:
        """Get an answer to a query using retrieved context.

        If llm_client is configured and chunks were found, synthesizes an
        answer. Otherwise returns QueryResponse with answer=None.
        """
        results = self.get_context(query, document=document, k=k)

        answer = None
        prompt = None
        if results:
            prompt = self.build_prompt(query, results)
            if self._llm_client:
                answer = self._synthesize_answer(prompt)

        return QueryResponse(
            query=query,
            answer=answer,
            results=results,
            prompt=prompt,
        )

    def _synthesize_answer(self, prompt: str) -> str:
        """Send the prompt to the LLM and return its answer."""
        logger.debug("Synthesizing answer from %d-character prompt", len(prompt))
        return self._llm_client.complete(
            messages=[{"role": "user", "content": prompt}],
            temperature=self.synthesis_temperature,
        ).strip()
