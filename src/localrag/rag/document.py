"""Chunk and search result data structures."""

from pydantic import BaseModel, Field, field_validator


class Chunk(BaseModel):
    """A span of document text with its embedding and source attribution."""
    embedding: list[float] = Field(default_factory=list)
    text: str
    source: str

    @field_validator("text")
    @classmethod
    def _text_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("chunk text must not be blank")
        return value

    @property
    def dimension(self) -> int:
        return len(self.embedding)


class SearchResult(BaseModel):
    """A chunk returned by a similarity search."""
    chunk: Chunk
    score: float
