from __future__ import annotations

import argparse
from pathlib import Path

from cli.common import cancel_on_interrupt, settings_list_from_args
from sonar_sync.client import ServerClientFactory
from sonar_sync.progress import ProgressIndicator
from sonar_sync.providers import build_sync_context
from sonar_sync.sync import sync


def run_sync(args: argparse.Namespace, factory: ServerClientFactory) -> int:
    settings_list = settings_list_from_args(args)
    output_dir = Path(args.output_dir)
    context = build_sync_context(args.name, settings_list, output_dir, factory)

    with cancel_on_interrupt(ProgressIndicator()) as indicator:
        result = sync(context, indicator)

    print(f"Synced {result.violations_count} violations and {result.rules_count} rules")
    print("Snapshots saved to:", output_dir)
    return 0
