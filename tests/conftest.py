"""
Test configuration and fixtures.
"""

from typing import Any

import pytest

from localrag.exceptions import TransportError
from localrag.rag import BaseEmbedding, BaseGenerator, FakeEmbedding
from localrag.transport import Transport


class RecordingGenerator(BaseGenerator):
    """Generator that records prompts and returns a canned answer."""

    def __init__(self, answer: str = "42"):
        self.answer = answer
        self.calls: list[tuple[str, str]] = []

    async def generate(self, model: str, prompt: str) -> str:
        self.calls.append((model, prompt))
        return self.answer


class FailingEmbedding(BaseEmbedding):
    """Embedding that fails on the n-th call (1-based)."""

    def __init__(self, fail_on: int, dimension: int = 8):
        self.fail_on = fail_on
        self.dimension = dimension
        self.calls = 0

    async def embed(self, text: str, model: str) -> list[float]:
        self.calls += 1
        if self.calls == self.fail_on:
            raise TransportError("connection reset")
        return [1.0] * self.dimension


class FakeTransport(Transport):
    """In-process transport answering like an Ollama server."""

    def __init__(self, embedding: FakeEmbedding | None = None, answer: str = "From the context: 42"):
        self.embedding = embedding or FakeEmbedding(dimension=32)
        self.answer = answer
        self.requests: list[tuple[str, dict[str, Any] | None]] = []
        self.closed = False

    async def post_json(self, path: str, payload: dict[str, Any]) -> dict[str, Any]:
        self.requests.append((path, payload))
        if path == "/api/embeddings":
            return {"embedding": await self.embedding.embed(payload["prompt"], payload["model"])}
        if path == "/api/generate":
            return {"model": payload["model"], "response": self.answer, "done": True}
        raise AssertionError(f"unexpected path {path}")

    async def get_json(self, path: str) -> dict[str, Any]:
        self.requests.append((path, None))
        return {"models": [{"name": "llama3.2:latest"}, {"name": "nomic-embed-text:latest"}]}

    async def check(self, path: str) -> int:
        self.requests.append((path, None))
        return 200

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_embedding():
    return FakeEmbedding(dimension=64)


@pytest.fixture
def generator():
    return RecordingGenerator()


@pytest.fixture
def docs_folder(tmp_path):
    """A documents folder with eligible, ineligible and nested files."""
    (tmp_path / "cats.txt").write_text("Cats are small domesticated felines that purr and hunt mice.", encoding="utf-8")
    (tmp_path / "NOTES.MD").write_text("# Rockets\n\nRockets burn fuel to produce thrust.", encoding="utf-8")
    (tmp_path / "report.pdf").write_bytes(b"%PDF-1.4 not text")
    nested = tmp_path / "nested"
    nested.mkdir()
    (nested / "prices.csv").write_text("item,price\napple,1.20\npear,0.90\n", encoding="utf-8")
    (nested / "blank.txt").write_text("   \n\t  ", encoding="utf-8")
    return tmp_path
