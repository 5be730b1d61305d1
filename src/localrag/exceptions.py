"""
Exceptions raised by the indexing and query core.
"""


class RAGError(Exception):
    """Base exception for localrag errors."""

    def __init__(self, message: str, code: int | None = None):
        self.message = message
        self.code = code
        super().__init__(self.message)


class InvalidConfigurationError(RAGError, ValueError):
    """Raised when parameters or settings cannot be used as given."""

    def __init__(self, message: str):
        super().__init__(message, code=1001)


class NotFoundError(RAGError, FileNotFoundError):
    """Raised when a documents folder does not exist."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Folder not found: {path}", code=1002)


class TransportError(RAGError):
    """Raised on connection failures and timeouts."""

    def __init__(self, message: str = "Failed to reach the model service"):
        super().__init__(message, code=1003)


class ServiceError(RAGError):
    """Raised when the service answers with a non-success status."""

    def __init__(self, status_code: int, message: str = ""):
        self.status_code = status_code
        detail = f": {message}" if message else ""
        super().__init__(f"Service returned HTTP {status_code}{detail}", code=1004)


class MalformedResponseError(RAGError):
    """Raised when a response body lacks the expected field or cannot be parsed."""

    def __init__(self, message: str):
        super().__init__(f"Malformed response: {message}", code=1005)


class OperationCancelledError(RAGError):
    """Raised when an operation is stopped through its cancellation token."""

    def __init__(self, message: str = "Operation cancelled"):
        super().__init__(message, code=1006)
