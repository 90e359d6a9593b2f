"""
Per-operation cancellation context.

A caller hands an ``OperationContext`` down to the store; the store checks it
before every database round trip and before committing, so a cancelled or
timed-out operation never leaves a half-applied write behind.
"""

import threading
import time
from typing import Optional

from app.core.exceptions import Cancelled


class OperationContext:
    """Cancellation flag plus an optional deadline."""

    def __init__(self, timeout: Optional[float] = None):
        """
        Args:
            timeout: Seconds from now after which the context counts as cancelled
        """
        self._cancelled = threading.Event()
        self.deadline: Optional[float] = time.monotonic() + timeout if timeout is not None else None

    def cancel(self) -> None:
        self._cancelled.set()

    @property
    def expired(self) -> bool:
        return self.deadline is not None and time.monotonic() >= self.deadline

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set() or self.expired

    def check(self) -> None:
        """Raise ``Cancelled`` if the context was cancelled or has expired."""
        if self._cancelled.is_set():
            raise Cancelled("Operation cancelled")
        if self.expired:
            raise Cancelled("Operation timed out")
