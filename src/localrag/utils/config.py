"""
Configuration utilities.
"""

import json
from pathlib import Path
from typing import Any, Callable

import yaml

from pydantic import BaseModel, ValidationError, field_validator, model_validator

from localrag.exceptions import InvalidConfigurationError

_LOADERS: dict[str, Callable[[Any], Any]] = {
    ".yaml": yaml.safe_load,
    ".yml": yaml.safe_load,
    ".json": json.load,
}


def _describe(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or 'settings'}: {err['msg']}"
        for err in error.errors()
    )


class Config(BaseModel):
    """
    Base configuration class.

    Validation failures surface as InvalidConfigurationError, with the
    pydantic ValidationError chained as the cause.
    """

    def __init__(self, **data: Any):
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise InvalidConfigurationError(f"Invalid {type(self).__name__}: {_describe(e)}") from e

    @classmethod
    def from_file(cls, path: str | Path) -> "Config":
        """Load configuration from a YAML or JSON file; an empty file gives defaults."""
        path = Path(path)
        loader = _LOADERS.get(path.suffix.lower())
        if loader is None:
            raise InvalidConfigurationError(f"Unsupported config file format: {path.suffix}")

        with open(path, encoding="utf-8") as f:
            try:
                data = loader(f) or {}
            except (ValueError, yaml.YAMLError) as e:
                raise InvalidConfigurationError(f"Cannot parse {path.name}: {e}") from e
        if not isinstance(data, dict):
            raise InvalidConfigurationError(f"{path.name} must contain a mapping of settings")
        return cls(**data)


class RAGSettings(Config):
    """
    Session settings for indexing and querying.

    Owned by the caller and handed to each RAGService operation.
    """
    base_url: str = "http://localhost:11434"
    embedding_model: str = "nomic-embed-text"
    llm_model: str = "llama3.2"
    documents_folder: str | None = None

    # Retrieval and chunking
    top_k: int = 3
    chunk_size: int = 200
    chunk_overlap: int = 20
    strict_dimensions: bool = False

    # Network behaviour
    timeout: float = 300.0
    concurrency: int = 1
    max_attempts: int = 1
    retry_backoff: float = 0.5

    # CUDA device the model service was started on. Informational only: the
    # device is chosen when launching the service (CUDA_VISIBLE_DEVICES).
    gpu_device: str | None = None

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if not value:
            raise ValueError("base_url must not be empty")
        return value

    @model_validator(mode="after")
    def _check_ranges(self) -> "RAGSettings":
        if self.top_k < 1:
            raise ValueError("top_k must be at least 1")
        if not self.chunk_size > self.chunk_overlap >= 0:
            raise ValueError(
                f"chunk_size ({self.chunk_size}) must be greater than "
                f"chunk_overlap ({self.chunk_overlap}) and overlap must not be negative"
            )
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")
        if self.concurrency < 1:
            raise ValueError("concurrency must be at least 1")
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        return self


def load_config(path: str | Path = "localrag.yaml") -> RAGSettings:
    """
    Load RAG settings from file.

    Args:
        path: Path to config file

    Returns:
        RAGSettings instance (defaults when the file does not exist)
    """
    path = Path(path)

    if not path.exists():
        return RAGSettings()

    return RAGSettings.from_file(path)
