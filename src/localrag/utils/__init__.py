"""
Utility modules.
"""

from localrag.utils.cancellation import CancellationToken
from localrag.utils.config import Config, RAGSettings, load_config
from localrag.utils.logging import get_logger, set_log_level

__all__ = [
    "CancellationToken",
    "Config",
    "RAGSettings",
    "load_config",
    "get_logger",
    "set_log_level",
]
