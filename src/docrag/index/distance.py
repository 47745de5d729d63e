# src/docrag/index/distance.py
"""Distance and similarity helpers for embedding vectors."""

from collections.abc import Sequence

import numpy as np

from docrag.exceptions import DimensionMismatchError


def l2_distance(a: Sequence[float], b: Sequence[float]) -> float:
    """Euclidean distance between two vectors of equal length.

    Raises:
        DimensionMismatchError: If the vectors differ in length.
    """
    if len(a) != len(b):
        raise DimensionMismatchError(len(a), len(b))
    diff = np.asarray(a, dtype=np.float64) - np.asarray(b, dtype=np.float64)
    return float(np.sqrt(np.sum(diff * diff)))


def similarity_from_distance(distance: float) -> float:
    """Map a distance in [0, inf) to a similarity score in (0, 1]."""
    return 1.0 / (1.0 + distance)
