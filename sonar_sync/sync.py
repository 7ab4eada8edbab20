"""sonar_sync/sync.py

One sync pass: run the issues provider, then the rules provider, and report
their counts.

Providers are looked up on the :class:`SyncContext`. A provider that is not
registered simply leaves its count at zero.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Protocol

from .progress import ProgressIndicator
from .types import ServerSettings, SyncResult

logger = logging.getLogger(__name__)

ISSUES_PROVIDER = "issues"
RULES_PROVIDER = "rules"


class SyncProvider(Protocol):
    def sync_with_sonar(self, context: "SyncContext", indicator: ProgressIndicator) -> int: ...


@dataclass
class SyncContext:
    """What a sync pass runs against: the configured settings and the providers registered for them."""

    name: str
    settings: List[ServerSettings] = field(default_factory=list)
    services: Dict[str, SyncProvider] = field(default_factory=dict)

    def get_service(self, key: str) -> Optional[SyncProvider]:
        return self.services.get(key)

    def register(self, key: str, provider: SyncProvider) -> None:
        self.services[key] = provider


def sync(context: SyncContext, indicator: ProgressIndicator) -> SyncResult:
    result = SyncResult()

    issues_provider = context.get_service(ISSUES_PROVIDER)
    if issues_provider is not None:
        result.violations_count = issues_provider.sync_with_sonar(context, indicator)

    rules_provider = context.get_service(RULES_PROVIDER)
    if rules_provider is not None:
        result.rules_count = rules_provider.sync_with_sonar(context, indicator)

    logger.info(
        "Sync of %s finished: %d violations, %d rules",
        context.name,
        result.violations_count,
        result.rules_count,
    )
    return result
