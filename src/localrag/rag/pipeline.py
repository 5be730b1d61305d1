"""Question answering over a VectorIndex."""

import logging
from typing import Optional

from localrag.utils.cancellation import CancellationToken

from .base import BaseEmbedding, BaseGenerator
from .document import SearchResult
from .vectorstore import VectorIndex

logger = logging.getLogger(__name__)

DEFAULT_TOP_K = 3
NO_DOCUMENTS_MESSAGE = "No documents have been indexed yet. Please index your documents first."
NO_RESPONSE_MESSAGE = "No response received."

PROMPT_INSTRUCTION = "Use only the following context from the indexed documents to answer the question."


def format_context(results: list[SearchResult]) -> str:
    """Render retrieved chunks, each preceded by its source label."""
    return "".join(f"[Source: {r.chunk.source}]\n{r.chunk.text}\n\n" for r in results)


def build_prompt(question: str, results: list[SearchResult]) -> str:
    """Assemble the grounded prompt sent to the generation model."""
    return (
        f"{PROMPT_INSTRUCTION}\n\n"
        f"Context:\n{format_context(results)}\n"
        f"Question: {question}\n\n"
        f"Answer:"
    )


class QueryPipeline:
    """Embeds a question, retrieves context and asks the generator."""

    def __init__(self, embedding: BaseEmbedding, generator: BaseGenerator, index: VectorIndex):
        self.embedding = embedding
        self.generator = generator
        self.index = index

    async def retrieve(
        self,
        question: str,
        embedding_model: str,
        top_k: int = DEFAULT_TOP_K,
        cancel_token: Optional[CancellationToken] = None,
    ) -> list[SearchResult]:
        if cancel_token:
            cancel_token.raise_if_cancelled()
        query_vector = await self.embedding.embed(question, embedding_model)
        return self.index.search(query_vector, top_k)

    async def answer(
        self,
        question: str,
        llm_model: str,
        embedding_model: str,
        top_k: int = DEFAULT_TOP_K,
        cancel_token: Optional[CancellationToken] = None,
    ) -> str:
        """
        Answer a question from the indexed documents.

        Returns NO_DOCUMENTS_MESSAGE without any request when the index is
        empty, and NO_RESPONSE_MESSAGE when the generator returns no text.
        """
        if self.index.size() == 0:
            return NO_DOCUMENTS_MESSAGE

        results = await self.retrieve(question, embedding_model, top_k, cancel_token)
        logger.info(f"Retrieved {len(results)} chunks for question ({len(question)} chars)")
        prompt = build_prompt(question, results)

        if cancel_token:
            cancel_token.raise_if_cancelled()
        answer = await self.generator.generate(llm_model, prompt)
        return answer if answer else NO_RESPONSE_MESSAGE
