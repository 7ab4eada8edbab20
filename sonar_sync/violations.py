"""sonar_sync/violations.py"""

from __future__ import annotations

import logging
from typing import List, Optional

from .client import ServerClientFactory
from .queries import ViolationQuery
from .types import ServerSettings, Violation

logger = logging.getLogger(__name__)


def get_violations(
    settings: Optional[ServerSettings],
    factory: Optional[ServerClientFactory] = None,
) -> List[Violation]:
    """Fetch every violation of ``settings.resource`` (all depths, all five severities).

    ``None`` settings yields ``[]`` without building a client.
    """
    if settings is None:
        return []

    client = (factory or ServerClientFactory()).build(settings)
    violations = client.find_violations(ViolationQuery.for_resource(settings.resource)) or []
    logger.debug("Fetched %d violations for %s", len(violations), settings.resource)
    return violations
