from __future__ import annotations

import argparse

from cli.common import settings_from_args
from sonar_sync.client import ServerClientFactory
from sonar_sync.resources import list_all_projects_and_modules


def run_resources(args: argparse.Namespace, factory: ServerClientFactory) -> int:
    client = factory.build(settings_from_args(args))
    resources = list_all_projects_and_modules(client)
    for r in resources:
        indent = "  " if r.is_module else ""
        lang = f" [{r.language}]" if r.language else ""
        print(f"{indent}{r.key} ({r.qualifier}){lang}")
    print(f"{len(resources)} projects and modules")
    return 0
