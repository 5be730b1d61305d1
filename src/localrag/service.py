"""
Caller-facing facade over the indexing and query core.
"""

import asyncio
from typing import Callable, Optional

from localrag.exceptions import InvalidConfigurationError
from localrag.providers.ollama import OllamaClient
from localrag.providers.retry import RetryPolicy
from localrag.rag.chunking import WordWindowChunker
from localrag.rag.indexer import Indexer, ProgressSink
from localrag.rag.pipeline import QueryPipeline
from localrag.rag.vectorstore import VectorIndex
from localrag.transport import HTTPTransport, Transport
from localrag.utils.cancellation import CancellationToken
from localrag.utils.config import RAGSettings
from localrag.utils.logging import get_logger

logger = get_logger(__name__)

TransportFactory = Callable[[RAGSettings], Transport]


def default_transport_factory(settings: RAGSettings) -> Transport:
    return HTTPTransport(settings.base_url, timeout=settings.timeout)


def retry_policy_for(settings: RAGSettings) -> RetryPolicy:
    return RetryPolicy(max_attempts=settings.max_attempts, base_delay=settings.retry_backoff)


class RAGService:
    """
    Owns one VectorIndex and runs index, query and connection checks on it.

    Settings are passed to every call; the service keeps no configuration
    between calls. Operations on the same service run one at a time.

    Example:
        ```python
        service = RAGService()
        settings = RAGSettings(documents_folder="~/notes")
        count = await service.index_documents(settings, progress=print)
        print(await service.query("What did we decide about caching?", settings))
        ```
    """

    def __init__(
        self,
        index: Optional[VectorIndex] = None,
        transport_factory: Optional[TransportFactory] = None,
    ):
        self.index = index or VectorIndex()
        self.transport_factory = transport_factory or default_transport_factory
        self._lock = asyncio.Lock()

    @property
    def indexed_chunk_count(self) -> int:
        return self.index.size()

    def clear_index(self) -> None:
        self.index.clear()
        logger.info("Index cleared")

    def _client(self, transport: Transport, settings: RAGSettings) -> OllamaClient:
        return OllamaClient(transport, retry_policy=retry_policy_for(settings))

    async def index_documents(
        self,
        settings: RAGSettings,
        progress: Optional[ProgressSink] = None,
        cancel_token: Optional[CancellationToken] = None,
    ) -> int:
        """Rebuild the index from ``settings.documents_folder``; returns the chunk count."""
        if not settings.documents_folder or not settings.documents_folder.strip():
            raise InvalidConfigurationError("documents_folder is not set")

        self.index.strict_dimensions = settings.strict_dimensions
        chunker = WordWindowChunker(settings.chunk_size, settings.chunk_overlap)
        async with self._lock:
            async with self.transport_factory(settings) as transport:
                indexer = Indexer(
                    self._client(transport, settings),
                    self.index,
                    chunker=chunker,
                    concurrency=settings.concurrency,
                )
                return await indexer.index_documents(
                    settings.documents_folder,
                    settings.embedding_model,
                    progress=progress,
                    cancel_token=cancel_token,
                )

    async def query(
        self,
        question: str,
        settings: RAGSettings,
        cancel_token: Optional[CancellationToken] = None,
    ) -> str:
        """Answer a question from the indexed documents."""
        async with self._lock:
            async with self.transport_factory(settings) as transport:
                client = self._client(transport, settings)
                pipeline = QueryPipeline(client, client, self.index)
                return await pipeline.answer(
                    question,
                    settings.llm_model,
                    settings.embedding_model,
                    top_k=settings.top_k,
                    cancel_token=cancel_token,
                )

    async def test_connection(self, settings: RAGSettings) -> bool:
        """Return True when the model service at ``settings.base_url`` is reachable."""
        async with self.transport_factory(settings) as transport:
            return await OllamaClient(transport).ping()
