"""Offline embedding implementations."""

import hashlib
import math
import re

from .base import BaseEmbedding


class FakeEmbedding(BaseEmbedding):
    """
    Deterministic bag-of-words embedding that needs no model service.

    Each lower-cased word is hashed into one of ``dimension`` buckets and the
    resulting count vector is L2-normalised, so texts sharing words score
    higher than unrelated texts. The model name is recorded but otherwise
    ignored.
    """

    def __init__(self, dimension: int = 64, seed: int = 42):
        self._dimension = dimension
        self.seed = seed
        self.calls: list[tuple[str, str]] = []

    @property
    def dimension(self) -> int:
        return self._dimension

    def _bucket(self, word: str) -> int:
        digest = hashlib.sha256(f"{self.seed}:{word}".encode()).digest()
        return int.from_bytes(digest[:4], "big") % self._dimension

    def _hash_text(self, text: str) -> list[float]:
        vector = [0.0] * self._dimension
        for word in re.findall(r"\w+", text.lower()):
            vector[self._bucket(word)] += 1.0
        norm = math.sqrt(sum(v * v for v in vector))
        return [v / norm for v in vector] if norm else vector

    async def embed(self, text: str, model: str) -> list[float]:
        self.calls.append((text, model))
        return self._hash_text(text)
