"""End-to-end tests for RAGService."""

import pytest

from localrag import (
    NO_DOCUMENTS_MESSAGE,
    CancellationToken,
    InvalidConfigurationError,
    NotFoundError,
    OperationCancelledError,
    RAGService,
    RAGSettings,
    VectorIndex,
)

from conftest import FakeTransport


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def service(transport):
    return RAGService(transport_factory=lambda settings: transport)


def settings_for(folder, **overrides) -> RAGSettings:
    return RAGSettings(documents_folder=str(folder), **overrides)


class TestRAGServiceIndexing:
    @pytest.mark.asyncio
    async def test_single_file(self, tmp_path, service, transport):
        (tmp_path / "a.txt").write_text("alpha beta gamma", encoding="utf-8")
        count = await service.index_documents(settings_for(tmp_path, chunk_size=200, chunk_overlap=20))
        assert count == 1
        assert service.indexed_chunk_count == 1
        assert transport.requests == [("/api/embeddings", {"model": "nomic-embed-text", "prompt": "alpha beta gamma"})]
        assert transport.closed

    @pytest.mark.asyncio
    async def test_only_pdf(self, tmp_path, service, transport):
        (tmp_path / "scan.pdf").write_bytes(b"%PDF-1.4")
        assert await service.index_documents(settings_for(tmp_path)) == 0
        assert service.indexed_chunk_count == 0
        assert transport.requests == []

    @pytest.mark.asyncio
    async def test_missing_folder_keeps_previous_index(self, docs_folder, tmp_path, service):
        await service.index_documents(settings_for(docs_folder))
        before = service.indexed_chunk_count
        assert before == 3
        with pytest.raises(NotFoundError):
            await service.index_documents(settings_for(tmp_path / "does-not-exist"))
        assert service.indexed_chunk_count == before

    @pytest.mark.asyncio
    async def test_folder_required(self, service):
        with pytest.raises(InvalidConfigurationError):
            await service.index_documents(RAGSettings())

    @pytest.mark.asyncio
    async def test_progress(self, docs_folder, service):
        messages = []
        await service.index_documents(settings_for(docs_folder), progress=messages.append)
        assert len(messages) == 4
        assert all(m.startswith("Indexing ") for m in messages)

    @pytest.mark.asyncio
    async def test_cancelled(self, docs_folder, service, transport):
        token = CancellationToken()
        token.cancel()
        with pytest.raises(OperationCancelledError):
            await service.index_documents(settings_for(docs_folder), cancel_token=token)
        assert transport.requests == []

    @pytest.mark.asyncio
    async def test_clear_index(self, docs_folder, service):
        await service.index_documents(settings_for(docs_folder))
        service.clear_index()
        assert service.indexed_chunk_count == 0

    @pytest.mark.asyncio
    async def test_strict_dimensions_applied(self, docs_folder, transport):
        index = VectorIndex()
        service = RAGService(index=index, transport_factory=lambda settings: transport)
        await service.index_documents(settings_for(docs_folder, strict_dimensions=True))
        assert index.strict_dimensions is True


class TestRAGServiceQuery:
    @pytest.mark.asyncio
    async def test_query_before_indexing(self, service, transport):
        answer = await service.query("What is in my notes?", RAGSettings())
        assert answer == NO_DOCUMENTS_MESSAGE
        assert transport.requests == []

    @pytest.mark.asyncio
    async def test_query(self, docs_folder, service, transport):
        settings = settings_for(docs_folder, llm_model="mistral", top_k=2)
        await service.index_documents(settings)
        transport.requests.clear()

        answer = await service.query("How do rockets produce thrust?", settings)

        assert answer == "From the context: 42"
        paths = [path for path, _ in transport.requests]
        assert paths == ["/api/embeddings", "/api/generate"]
        generate_payload = transport.requests[1][1]
        assert generate_payload["model"] == "mistral"
        assert generate_payload["stream"] is False
        assert generate_payload["prompt"].count("[Source: ") == 2
        assert "Question: How do rockets produce thrust?" in generate_payload["prompt"]


class TestRAGServiceConnection:
    @pytest.mark.asyncio
    async def test_reachable(self, service, transport):
        assert await service.test_connection(RAGSettings()) is True
        assert transport.requests == [("/api/tags", None)]

    @pytest.mark.asyncio
    async def test_unreachable(self):
        service = RAGService()
        settings = RAGSettings(base_url="http://127.0.0.1:9", timeout=2.0)
        assert await service.test_connection(settings) is False
