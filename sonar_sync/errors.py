"""sonar_sync/errors.py

Exceptions raised by the sync layer.

Only two conditions ever surface from the core: a failed connection probe and
a cooperative cancellation. Empty or missing data is never an error.
"""

from __future__ import annotations

from typing import Optional


class SonarSyncError(Exception):
    """Base class for all sonar_sync errors."""


class SonarServerConnectionError(SonarSyncError):
    def __init__(
        self,
        message: str,
        *,
        url: Optional[str] = None,
        status_code: Optional[int] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code
        self.cause = cause


class ProcessCanceledError(SonarSyncError):
    """Raised by :meth:`ProgressIndicator.check_canceled` once cancel() was called."""


class SonarConfigError(SonarSyncError):
    pass
