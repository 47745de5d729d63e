# src/docrag/index/__init__.py
"""Vector search for docrag."""

from docrag.index.distance import l2_distance, similarity_from_distance
from docrag.index.vector_index import VectorIndex

__all__ = ["VectorIndex", "l2_distance", "similarity_from_distance"]
