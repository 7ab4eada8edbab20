from __future__ import annotations

import argparse
from typing import List

from cli.common import cancel_on_interrupt, settings_list_from_args
from sonar_sync.client import ServerClientFactory
from sonar_sync.progress import ProgressIndicator
from sonar_sync.rules import collect_rules
from sonar_sync.types import Rule


def run_rules(args: argparse.Namespace, factory: ServerClientFactory) -> int:
    settings_list = settings_list_from_args(args)
    collected: List[Rule] = []

    # On cancel, ProcessCanceledError reaches sonar_cli.main; what was
    # already collected is still in ``collected`` but is not printed.
    with cancel_on_interrupt(ProgressIndicator()) as indicator:
        collect_rules(settings_list, indicator, factory, into=collected)

    for rule in collected:
        print(f"{rule.key:30} {rule.language or '-':8} {rule.severity or '-':9} {rule.title or ''}")
    print(f"Collected {len(collected)} distinct rules from {len(settings_list)} resources")
    return 0
