#!/usr/bin/env python3
"""
Command-line front end for Sonar server sync.

Commands:
  verify     - probe the server's version endpoint
  resources  - list all projects and their modules
  violations - list violations of one resource
  rules      - collect the deduplicated rule set of the configured resources
  sync       - write violations.json + rules.json snapshots

Usage:
  python sonar_cli.py verify --host https://sonar.example.com
  python sonar_cli.py violations --resource org.example:app
  python sonar_cli.py rules --settings-file sonar-sync.json
  python sonar_cli.py sync --settings-file sonar-sync.json --output-dir runs/sonar-sync

Credentials: SONAR_USER / SONAR_PASSWORD (read from the environment or .env).
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

import requests

from cli.commands.resources import run_resources
from cli.commands.rules import run_rules
from cli.commands.sync import run_sync
from cli.commands.verify import run_verify
from cli.commands.violations import run_violations
from cli.common import configure_logging
from sonar_sync.client import ServerClientFactory
from sonar_sync.config import load_env
from sonar_sync.errors import ProcessCanceledError, SonarSyncError


def _add_common_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--host", help="Sonar server URL (default: SONAR_HOST)")
    p.add_argument("--user", help="Sonar user (default: SONAR_USER)")
    p.add_argument("--anonymous", action="store_true", help="Do not send credentials")
    p.add_argument("--resource", help="Resource key (default: SONAR_RESOURCE)")
    p.add_argument("--verbose", "-v", action="store_true", help="Debug logging")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Sync violations and rules from a Sonar server.")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("verify", help="Check that the server answers on /api/server/version")
    _add_common_args(p)

    p = sub.add_parser("resources", help="List projects and modules")
    _add_common_args(p)

    p = sub.add_parser("violations", help="List violations of one resource")
    _add_common_args(p)

    for name, help_text in (
        ("rules", "Collect rules for the configured resources"),
        ("sync", "Write violation and rule snapshots"),
    ):
        p = sub.add_parser(name, help=help_text)
        _add_common_args(p)
        p.add_argument("--settings-file", help="JSON file listing hosts and resources")
        if name == "sync":
            p.add_argument("--output-dir", default="runs/sonar-sync")
            p.add_argument("--name", default="default", help="Name recorded in the snapshots")

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)
    load_env()

    if args.command == "verify":
        return run_verify(args)

    factory = ServerClientFactory()
    commands = {
        "resources": run_resources,
        "violations": run_violations,
        "rules": run_rules,
        "sync": run_sync,
    }
    try:
        return commands[args.command](args, factory)
    except (ProcessCanceledError, KeyboardInterrupt):
        print("Canceled.", file=sys.stderr)
        return 130
    except SonarSyncError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    except requests.RequestException as e:
        print(f"ERROR: request to Sonar failed: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
