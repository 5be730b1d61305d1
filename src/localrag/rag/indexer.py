"""Folder indexing: discover, chunk, embed, store."""

import asyncio
import inspect
import logging
from pathlib import Path
from typing import Awaitable, Callable, Optional, Union

from localrag.exceptions import InvalidConfigurationError, NotFoundError
from localrag.utils.cancellation import CancellationToken

from .base import BaseChunker, BaseEmbedding
from .chunking import WordWindowChunker
from .document import Chunk
from .vectorstore import VectorIndex

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = frozenset({".txt", ".md", ".csv"})

ProgressSink = Callable[[str], Union[None, Awaitable[None]]]


def file_extension(path: Path) -> str:
    """
    Lower-cased text from the last dot of the file name, or "" without a dot.

    Unlike Path.suffix, a dotfile such as ".md" has the extension ".md".
    """
    name = path.name
    dot = name.rfind(".")
    return name[dot:].lower() if dot >= 0 else ""


def discover_files(folder: Path, extensions: frozenset[str] = SUPPORTED_EXTENSIONS) -> list[Path]:
    """Recursively list files under folder whose extension is allowed, sorted by path."""
    return sorted(
        path for path in folder.rglob("*")
        if path.is_file() and file_extension(path) in extensions
    )


class Indexer:
    """Builds a VectorIndex from the text files in a folder."""

    def __init__(
        self,
        embedding: BaseEmbedding,
        index: VectorIndex,
        chunker: Optional[BaseChunker] = None,
        concurrency: int = 1,
        extensions: frozenset[str] = SUPPORTED_EXTENSIONS,
    ):
        if concurrency < 1:
            raise InvalidConfigurationError("concurrency must be at least 1")
        self.embedding = embedding
        self.index = index
        self.chunker = chunker or WordWindowChunker()
        self.concurrency = concurrency
        self.extensions = frozenset(ext.lower() for ext in extensions)

    async def index_documents(
        self,
        folder: str | Path,
        embedding_model: str,
        progress: Optional[ProgressSink] = None,
        cancel_token: Optional[CancellationToken] = None,
    ) -> int:
        """
        Clear the index and rebuild it from the eligible files under folder.

        A failure part-way through leaves the index holding only the chunks
        appended before the failure; re-run indexing before querying.

        Args:
            folder: Documents folder, searched recursively
            embedding_model: Embedding model name passed to the client
            progress: Called with a status line before each file; may be async
            cancel_token: Stops the run before the next request once cancelled

        Returns:
            Number of chunks in the index

        Raises:
            NotFoundError: If folder does not exist
            OperationCancelledError: If cancel_token was triggered
        """
        folder = Path(folder).expanduser()
        if not folder.is_dir():
            raise NotFoundError(str(folder))

        self.index.clear()
        files = discover_files(folder, self.extensions)
        logger.info(f"Indexing {len(files)} files from {folder}")

        for path in files:
            if cancel_token:
                cancel_token.raise_if_cancelled()
            if progress:
                notified = progress(f"Indexing {path.name}…")
                if inspect.isawaitable(notified):
                    await notified
            text = path.read_text(encoding="utf-8", errors="replace")
            pieces = [piece for piece in self.chunker.chunk(text) if piece.strip()]
            await self._embed_file(pieces, path.name, embedding_model, cancel_token)
            logger.info(f"Indexed {path.name}: {len(pieces)} chunks")

        count = self.index.size()
        logger.info(f"Indexing complete: {count} chunks from {len(files)} files")
        return count

    async def _embed_file(
        self,
        pieces: list[str],
        source: str,
        model: str,
        cancel_token: Optional[CancellationToken],
    ) -> None:
        if self.concurrency == 1:
            for piece in pieces:
                await self._embed_and_append(piece, source, model, cancel_token)
            return

        semaphore = asyncio.Semaphore(self.concurrency)

        async def worker(piece: str) -> None:
            async with semaphore:
                await self._embed_and_append(piece, source, model, cancel_token)

        tasks = [asyncio.create_task(worker(piece)) for piece in pieces]
        try:
            await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

    async def _embed_and_append(
        self,
        text: str,
        source: str,
        model: str,
        cancel_token: Optional[CancellationToken],
    ) -> None:
        if cancel_token:
            cancel_token.raise_if_cancelled()
        vector = await self.embedding.embed(text, model)
        self.index.append(Chunk(embedding=vector, text=text, source=source))
