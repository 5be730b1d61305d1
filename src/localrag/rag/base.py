"""Base classes and abstract interfaces for RAG components."""

from abc import ABC, abstractmethod


class BaseEmbedding(ABC):
    """Abstract base class for embedding clients."""

    @abstractmethod
    async def embed(self, text: str, model: str) -> list[float]:
        pass


class BaseGenerator(ABC):
    """Abstract base class for text generation clients."""

    @abstractmethod
    async def generate(self, model: str, prompt: str) -> str:
        pass


class BaseChunker(ABC):
    """Abstract base class for text chunkers."""

    @abstractmethod
    def chunk(self, text: str) -> list[str]:
        pass
