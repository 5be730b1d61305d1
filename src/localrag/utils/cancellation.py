"""
Cooperative cancellation for long-running operations.
"""

import threading

from localrag.exceptions import OperationCancelledError


class CancellationToken:
    """
    A flag shared between a caller and a running operation.

    The operation polls the token before each outbound request and stops with
    OperationCancelledError once the caller has called cancel(). Requests
    already in flight are allowed to finish.
    """

    def __init__(self):
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self) -> None:
        if self._event.is_set():
            raise OperationCancelledError()
