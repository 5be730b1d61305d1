"""Word-window text chunking."""

from localrag.exceptions import InvalidConfigurationError

from .base import BaseChunker

DEFAULT_CHUNK_SIZE = 200
DEFAULT_OVERLAP = 20


def validate_window(chunk_size_words: int, overlap_words: int) -> None:
    """Reject window parameters that would give a zero or negative stride."""
    if overlap_words < 0:
        raise InvalidConfigurationError(f"overlap_words must not be negative, got {overlap_words}")
    if chunk_size_words <= overlap_words:
        raise InvalidConfigurationError(
            f"chunk_size_words ({chunk_size_words}) must be greater than overlap_words ({overlap_words})"
        )


def chunk_text(
    text: str,
    chunk_size_words: int = DEFAULT_CHUNK_SIZE,
    overlap_words: int = DEFAULT_OVERLAP,
) -> list[str]:
    """
    Split text into overlapping windows of whitespace-separated words.

    Each window holds up to ``chunk_size_words`` words joined by single spaces;
    consecutive windows start ``chunk_size_words - overlap_words`` words apart,
    so they share ``overlap_words`` words. The last window may be shorter.

    Args:
        text: Raw document text
        chunk_size_words: Words per window
        overlap_words: Words shared by consecutive windows

    Returns:
        List of chunk strings (empty for blank input)

    Raises:
        InvalidConfigurationError: If the stride would not be positive
    """
    validate_window(chunk_size_words, overlap_words)
    words = text.split()
    stride = chunk_size_words - overlap_words
    return [" ".join(words[start:start + chunk_size_words]) for start in range(0, len(words), stride)]


class WordWindowChunker(BaseChunker):
    """Chunker with fixed window parameters, validated up front."""

    def __init__(self, chunk_size: int = DEFAULT_CHUNK_SIZE, overlap: int = DEFAULT_OVERLAP):
        validate_window(chunk_size, overlap)
        self.chunk_size = chunk_size
        self.overlap = overlap

    @property
    def stride(self) -> int:
        return self.chunk_size - self.overlap

    def chunk(self, text: str) -> list[str]:
        return chunk_text(text, self.chunk_size, self.overlap)
