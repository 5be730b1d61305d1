"""
localrag - Question answering over a folder of text documents.

Documents are split into overlapping word windows, embedded by an Ollama
server and kept in an in-memory vector index; questions are answered by a
generation model grounded in the best-matching chunks.
"""

from localrag.exceptions import (
    RAGError,
    InvalidConfigurationError,
    NotFoundError,
    TransportError,
    ServiceError,
    MalformedResponseError,
    OperationCancelledError,
)
from localrag.rag import (
    Chunk,
    SearchResult,
    WordWindowChunker,
    chunk_text,
    FakeEmbedding,
    VectorIndex,
    cosine_similarity,
    Indexer,
    QueryPipeline,
    build_prompt,
    NO_DOCUMENTS_MESSAGE,
)
from localrag.providers import OllamaClient, RetryPolicy
from localrag.transport import Transport, HTTPTransport
from localrag.utils import CancellationToken, RAGSettings, load_config
from localrag.service import RAGService

__version__ = "0.1.0"
__all__ = [
    # Errors
    "RAGError",
    "InvalidConfigurationError",
    "NotFoundError",
    "TransportError",
    "ServiceError",
    "MalformedResponseError",
    "OperationCancelledError",
    # Core
    "Chunk",
    "SearchResult",
    "WordWindowChunker",
    "chunk_text",
    "FakeEmbedding",
    "VectorIndex",
    "cosine_similarity",
    "Indexer",
    "QueryPipeline",
    "build_prompt",
    "NO_DOCUMENTS_MESSAGE",
    # Clients
    "OllamaClient",
    "RetryPolicy",
    "Transport",
    "HTTPTransport",
    # Configuration
    "CancellationToken",
    "RAGSettings",
    "load_config",
    "RAGService",
]
