from __future__ import annotations

import argparse
import sys

from cli.common import settings_from_args
from sonar_sync.client import ServerClientFactory
from sonar_sync.severity import severity_to_highlight_type
from sonar_sync.violations import get_violations


def run_violations(args: argparse.Namespace, factory: ServerClientFactory) -> int:
    settings = settings_from_args(args)
    if not settings.resource:
        print("ERROR: no resource configured (use --resource or SONAR_RESOURCE).", file=sys.stderr)
        return 1

    violations = get_violations(settings, factory)
    for v in violations:
        highlight = severity_to_highlight_type(v.severity).value
        print(f"{v.severity or '-':9} {highlight:25} {v.resource_key}:{v.line or '-'} {v.rule_key} {v.message}")
    print(f"Retrieved {len(violations)} violations for {settings.resource}")
    return 0
