# src/docrag/index/vector_index.py
"""Exact nearest-neighbour search over a fixed set of vectors."""

from collections.abc import Sequence

import numpy as np

from docrag.exceptions import DimensionMismatchError
from docrag.index.distance import similarity_from_distance


class VectorIndex:
    """Brute-force L2 index over an ordered, immutable list of vectors.

    Every query scans all stored vectors. Results are ordered by ascending
    Euclidean distance; equal distances keep insertion order.

    Example:
        index = VectorIndex([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
        index.search([2, 3, 4], k=2)             # [0, 1]
        index.search_with_scores([2, 3, 4], k=1) # [(0, 0.366...)]
    """

    def __init__(self, vectors: Sequence[Sequence[float]]) -> None:
        """Build the index from a list of vectors.

        The vectors are copied; later changes to the input do not affect
        the index.

        Raises:
            DimensionMismatchError: If the vectors are not all the same length.
        """
        rows = [list(v) for v in vectors]
        if rows:
            dimension = len(rows[0])
            for row in rows[1:]:
                if len(row) != dimension:
                    raise DimensionMismatchError(dimension, len(row))
            self._vectors = np.array(rows, dtype=np.float64)
            self._dimension: int | None = dimension
        else:
            self._vectors = np.empty((0, 0), dtype=np.float64)
            self._dimension = None
        self._vectors.setflags(write=False)

    def __len__(self) -> int:
        return len(self._vectors)

    @property
    def dimension(self) -> int | None:
        """Vector length, or None for an empty index."""
        return self._dimension

    def get_vectors(self) -> list[list[float]]:
        """Return a copy of the stored vectors."""
        return [list(row) for row in self._vectors.tolist()]

    def _distances(self, query_vector: Sequence[float]) -> np.ndarray:
        if len(query_vector) != self._dimension:
            raise DimensionMismatchError(self._dimension or 0, len(query_vector))
        diff = self._vectors - np.asarray(query_vector, dtype=np.float64)
        return np.sqrt(np.sum(diff * diff, axis=1))

    def _ranked(self, query_vector: Sequence[float], k: int) -> tuple[np.ndarray, np.ndarray]:
        if k < 0:
            raise ValueError(f"k must be non-negative, got {k}")
        if len(self) == 0 or k == 0:
            return np.empty(0, dtype=np.intp), np.empty(0, dtype=np.float64)
        distances = self._distances(query_vector)
        order = np.argsort(distances, kind="stable")[:k]
        return order, distances[order]

    def search(self, query_vector: Sequence[float], k: int) -> list[int]:
        """Return the indices of the k nearest vectors, closest first.

        Args:
            query_vector: Vector with the same dimension as the index.
            k: Maximum number of results. Larger than the index returns all.

        Raises:
            DimensionMismatchError: If the query length differs from the index.
            ValueError: If k is negative.
        """
        order, _ = self._ranked(query_vector, k)
        return [int(i) for i in order]

    def search_with_scores(self, query_vector: Sequence[float], k: int) -> list[tuple[int, float]]:
        """Like search(), but pair each index with a similarity score in (0, 1]."""
        order, distances = self._ranked(query_vector, k)
        return [
            (int(i), similarity_from_distance(float(d)))
            for i, d in zip(order, distances, strict=True)
        ]
