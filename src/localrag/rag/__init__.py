"""Indexing and retrieval core: chunking, vector index, indexer and query pipeline."""

from .document import Chunk, SearchResult
from .base import BaseEmbedding, BaseGenerator, BaseChunker
from .chunking import WordWindowChunker, chunk_text
from .embeddings import FakeEmbedding
from .vectorstore import VectorIndex, cosine_similarity
from .indexer import Indexer, SUPPORTED_EXTENSIONS, discover_files, file_extension
from .pipeline import (
    QueryPipeline,
    build_prompt,
    NO_DOCUMENTS_MESSAGE,
    NO_RESPONSE_MESSAGE,
)

__all__ = [
    "Chunk", "SearchResult",
    "BaseEmbedding", "BaseGenerator", "BaseChunker",
    "WordWindowChunker", "chunk_text",
    "FakeEmbedding",
    "VectorIndex", "cosine_similarity",
    "Indexer", "SUPPORTED_EXTENSIONS", "discover_files", "file_extension",
    "QueryPipeline", "build_prompt", "NO_DOCUMENTS_MESSAGE", "NO_RESPONSE_MESSAGE",
]
