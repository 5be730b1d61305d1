"""
Ollama model service client.
"""

from typing import Any

from localrag.exceptions import MalformedResponseError
from localrag.rag.base import BaseEmbedding, BaseGenerator
from localrag.providers.retry import RetryPolicy
from localrag.transport import Transport
from localrag.utils.logging import get_logger

logger = get_logger(__name__)

EMBEDDINGS_PATH = "/api/embeddings"
GENERATE_PATH = "/api/generate"
STATUS_PATH = "/api/tags"


class OllamaClient(BaseEmbedding, BaseGenerator):
    """
    Embedding and generation client for an Ollama server.

    Every call is a single non-streaming request; batching is not used, so
    indexing issues one embedding request per chunk.
    """

    def __init__(
        self,
        transport: Transport,
        retry_policy: RetryPolicy | None = None
    ):
        self.transport = transport
        self.retry_policy = retry_policy or RetryPolicy.none()

    async def embed(self, text: str, model: str) -> list[float]:
        """
        Get the embedding vector for a piece of text.

        Args:
            text: Text to embed
            model: Embedding model name

        Returns:
            The embedding as a list of floats

        Raises:
            TransportError, ServiceError, MalformedResponseError
        """
        data = await self.retry_policy.run(
            lambda: self.transport.post_json(EMBEDDINGS_PATH, {"model": model, "prompt": text}),
            description=f"embedding with {model}"
        )
        return self._parse_embedding(data)

    async def generate(self, model: str, prompt: str) -> str:
        """
        Generate a completion for a prompt.

        Args:
            model: Generation model name
            prompt: Fully assembled prompt

        Returns:
            The generated text, or "" when the response carries none

        Raises:
            TransportError, ServiceError, MalformedResponseError
        """
        data = await self.retry_policy.run(
            lambda: self.transport.post_json(
                GENERATE_PATH, {"model": model, "prompt": prompt, "stream": False}
            ),
            description=f"generation with {model}"
        )
        text = data.get("response")
        if text is None:
            return ""
        if not isinstance(text, str):
            raise MalformedResponseError(f"'response' is {type(text).__name__}, expected a string")
        return text

    async def ping(self) -> bool:
        """Return True when the status endpoint answers with any 2xx; the body is not read."""
        try:
            await self.transport.check(STATUS_PATH)
        except Exception as e:
            logger.info(f"Model service unreachable: {e}")
            return False
        return True

    async def list_models(self) -> list[str]:
        """Names of the models installed on the server."""
        data = await self.transport.get_json(STATUS_PATH)
        models = data.get("models", [])
        if not isinstance(models, list):
            raise MalformedResponseError("'models' is not a list")
        return [m["name"] for m in models if isinstance(m, dict) and isinstance(m.get("name"), str)]

    @staticmethod
    def _parse_embedding(data: dict[str, Any]) -> list[float]:
        if "embedding" not in data:
            raise MalformedResponseError("missing 'embedding' field")
        values = data["embedding"]
        if not isinstance(values, list):
            raise MalformedResponseError(f"'embedding' is {type(values).__name__}, expected a list")
        if any(isinstance(v, bool) or not isinstance(v, (int, float)) for v in values):
            raise MalformedResponseError("'embedding' contains non-numeric values")
        return [float(v) for v in values]
