"""
Model service providers.
"""

from localrag.providers.ollama import OllamaClient
from localrag.providers.retry import RetryPolicy

__all__ = ["OllamaClient", "RetryPolicy"]
