"""sonar_sync/rules.py

Rule collection across several configured resources.

Each resource is asked for its ``language`` metric, the language's rule set
is fetched, and rules are merged by key: the first copy of a key wins and
insertion order is kept. The seen-key set belongs to a single
:func:`collect_rules` call.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Set

from .client import ServerClient, ServerClientFactory
from .progress import ProgressIndicator
from .queries import ResourceQuery, RuleQuery
from .types import Rule, ServerSettings

logger = logging.getLogger(__name__)

LANGUAGE_METRIC = "language"


def _find_languages(client: ServerClient, resource: str, indicator: ProgressIndicator) -> Iterable[str]:
    # Normally one resource comes back, but a key can match several.
    for found in client.find_resources(ResourceQuery.for_metrics(resource, LANGUAGE_METRIC)) or []:
        indicator.check_canceled()
        language = (found.language or "").strip()
        if language:
            yield language


def collect_rules(
    settings_list: Iterable[ServerSettings],
    indicator: ProgressIndicator,
    factory: Optional[ServerClientFactory] = None,
    into: Optional[List[Rule]] = None,
) -> List[Rule]:
    """Collect the rules of every configured resource's language, deduplicated by key.

    Cancellation is checked once per settings entry, once per resource found
    and once per rule. A cancel raises ProcessCanceledError; rules appended to
    ``into`` before that point stay in it.
    """
    factory = factory or ServerClientFactory()
    rules_result: List[Rule] = into if into is not None else []
    rule_keys: Set[str] = {r.key for r in rules_result}

    for settings in settings_list:
        indicator.check_canceled()

        client = factory.build(settings)

        resource = (settings.resource or "").strip()
        if not resource:
            continue

        for language in _find_languages(client, resource, indicator):
            rules = client.find_rules(RuleQuery(language)) or []
            for rule in rules:
                indicator.check_canceled()

                if rule.key not in rule_keys:
                    rule_keys.add(rule.key)
                    rules_result.append(rule)

    logger.debug("Collected %d distinct rules", len(rules_result))
    return rules_result
