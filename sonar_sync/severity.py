"""sonar_sync/severity.py

Server severity -> local highlight category.
"""

from __future__ import annotations

from typing import Optional

from .types import HighlightType, SeverityLevel

_HIGHLIGHT_BY_SEVERITY = {
    SeverityLevel.BLOCKER.value: HighlightType.ERROR,
    SeverityLevel.CRITICAL.value: HighlightType.GENERIC_ERROR_OR_WARNING,
    SeverityLevel.MAJOR.value: HighlightType.GENERIC_ERROR_OR_WARNING,
    SeverityLevel.MINOR.value: HighlightType.WEAK_WARNING,
    SeverityLevel.INFO.value: HighlightType.WEAK_WARNING,
}


def severity_to_highlight_type(severity: Optional[str]) -> HighlightType:
    """Case-insensitive; blank or unknown severities map to GENERIC_ERROR_OR_WARNING."""
    sev = (severity or "").strip().upper()
    return _HIGHLIGHT_BY_SEVERITY.get(sev, HighlightType.GENERIC_ERROR_OR_WARNING)
