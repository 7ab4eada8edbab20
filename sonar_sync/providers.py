"""sonar_sync/providers.py

Default issues/rules providers for :func:`sonar_sync.sync.sync`.

Both write a JSON snapshot into an output directory and return how many
items they synced:

  - violations.json : violations per resource + severity/highlight summary
  - rules.json      : the deduplicated rule set
"""

from __future__ import annotations

import logging
from collections import Counter
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from .client import ServerClientFactory
from .io import write_json
from .progress import ProgressIndicator
from .rules import collect_rules
from .severity import severity_to_highlight_type
from .sync import ISSUES_PROVIDER, RULES_PROVIDER, SyncContext
from .types import ServerSettings, Violation
from .violations import get_violations

logger = logging.getLogger(__name__)

VIOLATIONS_FILENAME = "violations.json"
RULES_FILENAME = "rules.json"


def summarize_violations(violations: List[Violation]) -> Dict[str, Dict[str, int]]:
    by_severity = Counter((v.severity or "UNKNOWN").upper() for v in violations)
    by_highlight = Counter(severity_to_highlight_type(v.severity).value for v in violations)
    return {
        "by_severity": dict(sorted(by_severity.items())),
        "by_highlight": dict(sorted(by_highlight.items())),
    }


class IssuesSyncProvider:
    def __init__(self, output_dir: Path, factory: Optional[ServerClientFactory] = None) -> None:
        self.output_dir = Path(output_dir)
        self.factory = factory or ServerClientFactory()

    @property
    def output_path(self) -> Path:
        return self.output_dir / VIOLATIONS_FILENAME

    def sync_with_sonar(self, context: SyncContext, indicator: ProgressIndicator) -> int:
        per_resource: Dict[str, List[Dict[str, Any]]] = {}
        all_violations: List[Violation] = []

        for settings in context.settings:
            indicator.check_canceled()
            if not (settings.resource or "").strip():
                continue

            violations = get_violations(settings, self.factory)
            all_violations.extend(violations)
            per_resource.setdefault(settings.resource, []).extend(v.to_dict() for v in violations)

        write_json(self.output_path, {
            "context": context.name,
            "generated_at": datetime.now().isoformat(),
            "violation_count": len(all_violations),
            **summarize_violations(all_violations),
            "violations": per_resource,
        })
        logger.info("Wrote %d violations to %s", len(all_violations), self.output_path)
        return len(all_violations)


class RulesSyncProvider:
    def __init__(self, output_dir: Path, factory: Optional[ServerClientFactory] = None) -> None:
        self.output_dir = Path(output_dir)
        self.factory = factory or ServerClientFactory()

    @property
    def output_path(self) -> Path:
        return self.output_dir / RULES_FILENAME

    def sync_with_sonar(self, context: SyncContext, indicator: ProgressIndicator) -> int:
        rules = collect_rules(context.settings, indicator, self.factory)

        write_json(self.output_path, {
            "context": context.name,
            "generated_at": datetime.now().isoformat(),
            "rule_count": len(rules),
            "rules": [r.to_dict() for r in rules],
        })
        logger.info("Wrote %d rules to %s", len(rules), self.output_path)
        return len(rules)


def build_sync_context(
    name: str,
    settings: List[ServerSettings],
    output_dir: Path,
    factory: Optional[ServerClientFactory] = None,
) -> SyncContext:
    """Context with both default providers registered, sharing one factory."""
    factory = factory or ServerClientFactory()
    context = SyncContext(name=name, settings=list(settings))
    context.register(ISSUES_PROVIDER, IssuesSyncProvider(output_dir, factory))
    context.register(RULES_PROVIDER, RulesSyncProvider(output_dir, factory))
    return context
