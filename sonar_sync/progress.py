"""sonar_sync/progress.py

Cooperative cancellation token passed through traversal and aggregation.
"""

from __future__ import annotations

import threading

from .errors import ProcessCanceledError


class ProgressIndicator:
    """Cancellation signal checked at loop boundaries.

    ``cancel()`` may be called from another thread (e.g. a signal handler);
    the loops observe it on their next ``check_canceled()``.
    """

    def __init__(self) -> None:
        self._canceled = threading.Event()

    def cancel(self) -> None:
        self._canceled.set()

    def is_canceled(self) -> bool:
        return self._canceled.is_set()

    def check_canceled(self) -> None:
        if self._canceled.is_set():
            raise ProcessCanceledError("Operation canceled")
