from __future__ import annotations

import argparse
import sys

from cli.common import settings_from_args
from sonar_sync.api import verify_sonar_connection
from sonar_sync.errors import SonarServerConnectionError


def run_verify(args: argparse.Namespace) -> int:
    settings = settings_from_args(args)
    print(f"Using Sonar host: {settings.host}")
    try:
        version = verify_sonar_connection(settings.host)
    except SonarServerConnectionError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    print(f"Connection OK. Server version: {version.strip()}")
    return 0
