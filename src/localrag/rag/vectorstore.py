"""In-memory vector index with brute-force cosine search."""

import logging
import math
import threading
from typing import Iterator

from localrag.exceptions import InvalidConfigurationError

from .document import Chunk, SearchResult

logger = logging.getLogger(__name__)

EPSILON = 1e-10


def cosine_similarity(a: list[float], b: list[float]) -> float:
    """
    Calculate cosine similarity between two vectors.

    Vectors of different lengths are compared over the shorter length. The
    epsilon in the denominator makes an all-zero vector score 0.0.
    """
    n = min(len(a), len(b))
    if n == 0:
        return 0.0
    dot_product = sum(a[i] * b[i] for i in range(n))
    norm_a = math.sqrt(sum(a[i] * a[i] for i in range(n)))
    norm_b = math.sqrt(sum(b[i] * b[i] for i in range(n)))
    return dot_product / (norm_a * norm_b + EPSILON)


class VectorIndex:
    """
    Append-only, clearable collection of chunks held in memory.

    Insertion order is kept but ranking is purely by score; equal scores keep
    insertion order. With ``strict_dimensions`` set, appending a chunk whose
    embedding length differs from the chunks already stored is rejected.
    """

    def __init__(self, strict_dimensions: bool = False):
        self.strict_dimensions = strict_dimensions
        self._chunks: list[Chunk] = []
        self._lock = threading.Lock()

    def append(self, chunk: Chunk) -> None:
        with self._lock:
            if self.strict_dimensions and self._chunks:
                expected = self._chunks[0].dimension
                if chunk.dimension != expected:
                    raise InvalidConfigurationError(
                        f"Embedding dimension {chunk.dimension} from '{chunk.source}' does not match "
                        f"index dimension {expected}; clear the index after changing embedding models"
                    )
            self._chunks.append(chunk)

    def clear(self) -> None:
        with self._lock:
            self._chunks.clear()

    def size(self) -> int:
        return len(self._chunks)

    def __len__(self) -> int:
        return len(self._chunks)

    def __iter__(self) -> Iterator[Chunk]:
        with self._lock:
            snapshot = list(self._chunks)
        return iter(snapshot)

    @property
    def dimension(self) -> int | None:
        """Embedding length of the first stored chunk, or None when empty."""
        with self._lock:
            return self._chunks[0].dimension if self._chunks else None

    def sources(self) -> list[str]:
        """Distinct source labels in insertion order."""
        with self._lock:
            return list(dict.fromkeys(chunk.source for chunk in self._chunks))

    def search(self, query_vector: list[float], top_k: int) -> list[SearchResult]:
        """
        Rank stored chunks by cosine similarity to a query vector.

        Args:
            query_vector: Embedding of the query
            top_k: Maximum number of results

        Returns:
            Up to ``top_k`` results ordered by descending score
        """
        with self._lock:
            snapshot = list(self._chunks)
        if not snapshot or top_k <= 0:
            return []

        mismatched = sum(1 for chunk in snapshot if chunk.dimension != len(query_vector))
        if mismatched:
            logger.warning(
                f"{mismatched} of {len(snapshot)} indexed embeddings differ from the query dimension "
                f"{len(query_vector)}; comparing over the shorter length"
            )

        results = [SearchResult(chunk=chunk, score=cosine_similarity(query_vector, chunk.embedding)) for chunk in snapshot]
        results.sort(key=lambda r: r.score, reverse=True)
        return results[:top_k]
